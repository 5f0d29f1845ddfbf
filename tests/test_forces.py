import numpy as np
import pytest
from rocket_flight import forces, constants as C
from rocket_flight.state import create_initial_state


def test_thrust_force_requires_fuel_and_throttle():
    assert forces.compute_thrust_force(100.0, 1.0) == C.THRUST_FORCE
    assert forces.compute_thrust_force(100.0, 0.5) == pytest.approx(25000.0)
    assert forces.compute_thrust_force(0.0, 1.0) == 0.0
    assert forces.compute_thrust_force(100.0, 0.0) == 0.0


def test_thrust_acceleration_vertical_at_zero_angle():
    ax, ay = forces.compute_thrust_acceleration(50000.0, 0.0, 1000.0)
    assert ax == pytest.approx(0.0)
    assert ay == pytest.approx(50.0)


def test_thrust_acceleration_at_half_pi_is_horizontal():
    ax, ay = forces.compute_thrust_acceleration(50000.0, np.pi / 2, 1000.0)
    assert ax == pytest.approx(50.0)
    assert ay == pytest.approx(0.0, abs=1e-9)


def test_wind_acceleration_pushes_toward_wind():
    a = forces.compute_wind_acceleration(vx=0.0, effective_wind=5.0, total_mass=1100.0)
    assert a == pytest.approx(1.225 * 5.0 * 500.0 / 1100.0)
    assert forces.compute_wind_acceleration(10.0, 0.0, 1100.0) < 0
    assert forces.compute_wind_acceleration(3.0, 3.0, 1100.0) == 0.0


def test_gravity_acceleration():
    assert forces.compute_gravity_acceleration() == -9.81


def test_drag_zero_at_rest_relative_to_air():
    assert forces.compute_drag_acceleration(0.0, 0.0, 0.0, 1000.0) == (0.0, 0.0)
    # Moving with the wind: no relative airflow
    assert forces.compute_drag_acceleration(4.0, 0.05, 4.0, 1000.0) == (0.0, 0.0)


def test_drag_opposes_relative_velocity():
    ax, ay = forces.compute_drag_acceleration(30.0, -40.0, 0.0, 1000.0)
    speed = 50.0
    magnitude = 0.5 * C.AIR_DENSITY * speed ** 2 * C.DRAG_COEFFICIENT * C.CROSS_SECTIONAL_AREA
    assert ax == pytest.approx(-magnitude * 30.0 / speed / 1000.0)
    assert ay == pytest.approx(magnitude * 40.0 / speed / 1000.0)
    assert np.hypot(ax, ay) == pytest.approx(magnitude / 1000.0)


def test_drag_uses_air_relative_velocity():
    # Still rocket in a 10 m/s wind is dragged downwind
    ax, ay = forces.compute_drag_acceleration(0.0, 0.0, 10.0, 1000.0)
    assert ax > 0
    assert ay == 0.0


def test_compute_accelerations_net_components():
    s = create_initial_state()
    s.vx, s.vy = 12.0, 30.0
    s.wind_speed, s.wind_gust = 3.0, 1.0
    s.angle = 0.3
    total = s.total_mass
    acc = forces.compute_accelerations(s, 0.8, total)

    assert acc['thrust_force'] == pytest.approx(40000.0)
    assert acc['thrust_x'] == pytest.approx(40000.0 * np.sin(0.3) / total)
    assert acc['thrust_y'] == pytest.approx(40000.0 * np.cos(0.3) / total)
    assert acc['gravity_y'] == -9.81
    assert acc['net_x'] == pytest.approx(acc['thrust_x'] + acc['wind_x'] + acc['drag_x'])
    assert acc['net_y'] == pytest.approx(acc['thrust_y'] - 9.81 + acc['drag_y'])
    assert acc['total_mass'] == total


def test_compute_accelerations_no_thrust_without_fuel():
    s = create_initial_state()
    s.fuel_mass = 0.0
    acc = forces.compute_accelerations(s, 1.0, s.dry_mass)
    assert acc['thrust_force'] == 0.0
    assert acc['thrust_x'] == 0.0
    assert acc['thrust_y'] == 0.0
