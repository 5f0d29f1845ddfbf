import numpy as np
import pytest
from rocket_flight import constants as C


def test_physical_constants():
    assert C.G == 9.81
    assert C.AIR_DENSITY == 1.225


def test_vehicle_defaults():
    assert C.DEFAULT_DRY_MASS == 1000.0
    assert C.DEFAULT_THRUST_SCALE == 1.0
    assert C.DEFAULT_FUEL_MASS == 100.0
    assert C.FUEL_CONSUMPTION_RATE == 5.0
    assert C.DRAG_COEFFICIENT == 0.3


def test_cross_sectional_area():
    assert C.CROSS_SECTIONAL_AREA == pytest.approx(np.pi * 1.1 ** 2)


def test_integrator_limits():
    assert C.MAX_DT == 0.05
    assert C.SPEED_EPSILON == 0.1
    assert C.GROUND_FRICTION_FACTOR == 0.95
    assert C.GUST_DECAY_FACTOR == 0.98
    assert C.INITIAL_ANGLE == pytest.approx(np.pi / 2)
