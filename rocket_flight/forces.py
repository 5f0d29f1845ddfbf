"""
Rocket Flight 2D Simulation - Force Computations

This module implements the acceleration contributions of one step:
- Thrust along the orientation angle
- Wind coupling on the horizontal axis
- Constant gravity
- Quadratic drag on air-relative velocity

All functions return accelerations (m/s^2); forces are divided by the
total mass of the step.
"""

from typing import Tuple

import numpy as np

from . import constants as C
from .state import RocketState
from .types import AccelerationBreakdown


def compute_thrust_force(fuel_mass: float, thrust_multiplier: float) -> float:
    """
    Thrust magnitude (N).

    The engine produces thrust only with propellant in the tank and a
    positive multiplier.
    """
    if fuel_mass > 0 and thrust_multiplier > 0:
        return C.THRUST_FORCE * thrust_multiplier
    return 0.0


def compute_thrust_acceleration(thrust_force: float, angle: float,
                                total_mass: float) -> Tuple[float, float]:
    """
    Decompose thrust into (ax, ay) using the orientation angle.

        ax = F * sin(angle) / m
        ay = F * cos(angle) / m
    """
    ax = thrust_force * np.sin(angle) / total_mass
    ay = thrust_force * np.cos(angle) / total_mass
    return float(ax), float(ay)


def compute_wind_acceleration(vx: float, effective_wind: float, total_mass: float,
                              air_density: float = C.AIR_DENSITY) -> float:
    """
    Horizontal acceleration pushing vx toward the wind speed.

        F = rho * (wind - vx) * WIND_FORCE_COEFFICIENT
    """
    wind_force = air_density * (effective_wind - vx) * C.WIND_FORCE_COEFFICIENT
    return wind_force / total_mass


def compute_gravity_acceleration(g: float = C.G) -> float:
    """Vertical gravitational acceleration (m/s^2, negative = down)."""
    return -g


def compute_drag_acceleration(vx: float, vy: float, effective_wind: float,
                              total_mass: float,
                              drag_coefficient: float = C.DRAG_COEFFICIENT,
                              area: float = C.CROSS_SECTIONAL_AREA,
                              air_density: float = C.AIR_DENSITY) -> Tuple[float, float]:
    """
    Drag acceleration opposing the air-relative velocity.

    D = 0.5 * rho * |v_rel|^2 * Cd * A

    Returns (0, 0) when the relative speed is at or below SPEED_EPSILON.
    """
    rel_vx = vx - effective_wind
    rel_vy = vy
    speed = np.sqrt(rel_vx ** 2 + rel_vy ** 2)
    if speed <= C.SPEED_EPSILON:
        return 0.0, 0.0

    drag_magnitude = 0.5 * air_density * speed ** 2 * drag_coefficient * area
    ax = -(drag_magnitude * rel_vx / speed) / total_mass
    ay = -(drag_magnitude * rel_vy / speed) / total_mass
    return float(ax), float(ay)


def compute_accelerations(state: RocketState, thrust_multiplier: float,
                          total_mass: float) -> AccelerationBreakdown:
    """
    Compute every acceleration contribution for the current state.

    Args:
        state: Current flight state (fuel already burned for this step)
        thrust_multiplier: Throttle for this step
        total_mass: Dry mass + fuel after the burn (kg)

    Returns:
        AccelerationBreakdown with per-source and net components
    """
    thrust_force = compute_thrust_force(state.fuel_mass, thrust_multiplier)
    thrust_x, thrust_y = compute_thrust_acceleration(thrust_force, state.angle, total_mass)

    wind = state.effective_wind
    wind_x = compute_wind_acceleration(state.vx, wind, total_mass, state.air_density)
    gravity_y = compute_gravity_acceleration(state.g)
    drag_x, drag_y = compute_drag_acceleration(
        state.vx, state.vy, wind, total_mass,
        drag_coefficient=state.drag_coefficient,
        area=state.cross_sectional_area,
        air_density=state.air_density,
    )

    return AccelerationBreakdown(
        thrust_x=thrust_x,
        thrust_y=thrust_y,
        wind_x=wind_x,
        drag_x=drag_x,
        drag_y=drag_y,
        gravity_y=gravity_y,
        net_x=thrust_x + wind_x + drag_x,
        net_y=thrust_y + gravity_y + drag_y,
        total_mass=total_mass,
        thrust_force=thrust_force,
    )
