"""
Rocket Flight 2D Simulation - Numerical Integration

This module implements the fixed-step semi-implicit Euler integrator:
velocity is advanced first, then position with the new velocity.
Ground contact and reorientation are applied after the kinematic update.
"""

import numpy as np

from . import constants as C
from .state import RocketState
from .mass import update_fuel, compute_total_mass
from .forces import compute_accelerations
from .types import AccelerationBreakdown


def clamp_dt(dt: float) -> float:
    """Limit a frame gap to MAX_DT."""
    if dt > C.MAX_DT:
        return C.MAX_DT
    return dt


def apply_ground_contact(state: RocketState) -> bool:
    """
    Keep the rocket on or above the ground plane.

    On contact: y = 0, no downward velocity, and horizontal friction
    decay while vertical speed is below SPEED_EPSILON.

    Returns:
        True if the rocket is in contact with the ground this step
    """
    if state.y > C.GROUND_LEVEL:
        return False

    state.y = C.GROUND_LEVEL
    state.vy = max(0.0, state.vy)
    if state.vy < C.SPEED_EPSILON:
        state.vx *= C.GROUND_FRICTION_FACTOR
    return True


def update_orientation(state: RocketState) -> None:
    """
    Point the rocket along its velocity.

    angle = atan2(vx, vy); the previous angle is kept at near-zero speed.
    """
    if abs(state.vx) > C.SPEED_EPSILON or abs(state.vy) > C.SPEED_EPSILON:
        state.angle = float(np.arctan2(state.vx, state.vy))


def euler_step(state: RocketState, dt: float,
               thrust_multiplier: float = 1.0) -> AccelerationBreakdown:
    """
    Advance the state in place by one semi-implicit Euler step.

    Args:
        state: Launched flight state (mutated)
        dt: Frame time (s), clamped to MAX_DT
        thrust_multiplier: Throttle for this step

    Returns:
        The accelerations applied during the step
    """
    dt = clamp_dt(dt)
    state.t += dt

    state.fuel_mass = update_fuel(
        state.fuel_mass, thrust_multiplier, dt, state.fuel_consumption_rate
    )
    total_mass = compute_total_mass(state.dry_mass, state.fuel_mass)

    acc = compute_accelerations(state, thrust_multiplier, total_mass)

    # Velocity first, then position with the updated velocity
    state.vx += acc['net_x'] * dt
    state.vy += acc['net_y'] * dt
    state.x += state.vx * dt
    state.y += state.vy * dt

    if state.y > state.max_altitude:
        state.max_altitude = state.y

    apply_ground_contact(state)
    update_orientation(state)
    return acc
