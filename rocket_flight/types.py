"""
Rocket Flight 2D Simulation - Type Definitions

This module provides TypedDict definitions for structured return types.
"""

from typing import TypedDict


class Telemetry(TypedDict):
    """Display-oriented snapshot of the flight state."""
    altitude: float  # Vertical position (m)
    velocity: float  # Speed magnitude (m/s)
    vx: float  # Horizontal velocity (m/s)
    vy: float  # Vertical velocity (m/s)
    fuel: float  # Remaining fuel, floored at 0 (kg)
    mass: float  # Dry mass + fuel (kg)
    time: str  # Elapsed flight time, two decimals (s)
    wind_speed: float  # Steady wind speed (m/s)
    angle: float  # Orientation in degrees, 0 = display "up"
    max_altitude: float  # Highest altitude since launch (m)
    launched: bool  # Whether the rocket has been launched


class AccelerationBreakdown(TypedDict):
    """Acceleration contributions applied by one integration step (m/s^2)."""
    thrust_x: float
    thrust_y: float
    wind_x: float
    drag_x: float
    drag_y: float
    gravity_y: float  # Negative (downward)
    net_x: float
    net_y: float
    total_mass: float  # Mass used for the step (kg)
    thrust_force: float  # Thrust magnitude (N)
