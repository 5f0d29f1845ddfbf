"""
Rocket Flight 2D Simulation - Validation Checks

This module implements input and state checks:
- Step inputs (dt, thrust multiplier) finite and non-negative
- Fuel within [0, capacity]
- Altitude not below the ground plane
- Finite kinematics
"""

from typing import Optional, Tuple

import numpy as np

from .state import RocketState


class ValidationError(ValueError):
    """Raised when an input or physics validation check fails."""
    pass


def check_step_inputs(dt: float, thrust_multiplier: float) -> bool:
    """
    Verify the arguments of a single update step.

    Raises:
        ValidationError: If dt or thrust_multiplier is non-finite or negative
    """
    if not np.isfinite(dt):
        raise ValidationError(f"Time step dt must be finite, got {dt}")
    if dt < 0:
        raise ValidationError(f"Time step dt must be non-negative, got {dt}")
    if not np.isfinite(thrust_multiplier):
        raise ValidationError(f"Thrust multiplier must be finite, got {thrust_multiplier}")
    if thrust_multiplier < 0:
        raise ValidationError(
            f"Thrust multiplier must be non-negative, got {thrust_multiplier}"
        )
    return True


def check_fuel_valid(fuel_mass: float, max_fuel: float) -> bool:
    """
    Check that fuel mass lies within the tank capacity.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if fuel_mass < 0:
        raise ValidationError(f"Negative fuel mass: {fuel_mass:.4f} kg")
    if fuel_mass > max_fuel:
        raise ValidationError(
            f"Fuel exceeds capacity: fuel = {fuel_mass:.4f} kg, "
            f"capacity = {max_fuel:.4f} kg"
        )
    return True


def check_altitude_valid(y: float) -> bool:
    """Check that the rocket is not below the ground plane."""
    if y < 0:
        raise ValidationError(f"Altitude below ground: y = {y:.4f} m")
    return True


def check_kinematics_finite(state: RocketState) -> bool:
    """Check that position, velocity and angle are finite numbers."""
    values = np.array([state.x, state.y, state.vx, state.vy, state.angle], dtype=float)
    if not np.all(np.isfinite(values)):
        raise ValidationError(
            f"Non-finite kinematics: x={state.x}, y={state.y}, "
            f"vx={state.vx}, vy={state.vy}, angle={state.angle}"
        )
    return True


def validate_state(state: RocketState, abort_on_error: bool = True) -> Tuple[bool, Optional[str]]:
    """
    Perform all validation checks on a state.

    Args:
        state: State to validate
        abort_on_error: If True, raise on the first failing check

    Returns:
        (True, None) when valid, (False, message) when invalid and not aborting
    """
    try:
        check_kinematics_finite(state)
        check_fuel_valid(state.fuel_mass, state.max_fuel)
        check_altitude_valid(state.y)
        return True, None
    except ValidationError as e:
        if abort_on_error:
            raise
        return False, str(e)
