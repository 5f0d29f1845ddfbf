"""
Rocket Flight 2D Simulation - Flight State

This module defines the single state dataclass holding the rocket
configuration together with its kinematic, resource, environment and
bookkeeping state. The integrator mutates it in place.
"""

from dataclasses import dataclass, replace
from typing import Optional

import numpy as np

from . import constants as C
from .config import RocketConfig


@dataclass
class RocketState:
    """
    Flight state of the rocket in a 2D vertical plane.

    Attributes:
        dry_mass: Structural mass without fuel (kg)
        thrust_scale: Configured nominal thrust scale (not used by forces)
        max_fuel: Tank capacity (kg)
        fuel_mass: Remaining fuel (kg), in [0, max_fuel]
        x, y: Horizontal and vertical position (m)
        vx, vy: Horizontal and vertical velocity (m/s)
        angle: Orientation (rad), pi/2 at construction
        wind_speed: Steady horizontal wind (m/s)
        wind_gust: Transient horizontal gust (m/s)
        t: Elapsed flight time since launch (s)
        launched: Whether update() advances the state
        max_altitude: Highest y reached since launch (m)
    """

    # Configuration
    dry_mass: float = C.DEFAULT_DRY_MASS
    thrust_scale: float = C.DEFAULT_THRUST_SCALE
    max_fuel: float = C.DEFAULT_FUEL_MASS
    fuel_consumption_rate: float = C.FUEL_CONSUMPTION_RATE
    rocket_radius: float = C.ROCKET_RADIUS
    rocket_height: float = C.ROCKET_HEIGHT
    drag_coefficient: float = C.DRAG_COEFFICIENT

    # Resources
    fuel_mass: float = C.DEFAULT_FUEL_MASS

    # Kinematics
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    angle: float = C.INITIAL_ANGLE

    # Environment
    wind_speed: float = 0.0
    wind_gust: float = 0.0

    # Bookkeeping
    t: float = 0.0
    launched: bool = False
    max_altitude: float = 0.0

    # Physical constants
    g: float = C.G
    air_density: float = C.AIR_DENSITY

    @property
    def cross_sectional_area(self) -> float:
        """Frontal area pi * r^2 (m^2)."""
        return float(np.pi * self.rocket_radius ** 2)

    @property
    def total_mass(self) -> float:
        """Dry mass plus remaining fuel (kg)."""
        return self.dry_mass + max(0.0, self.fuel_mass)

    @property
    def speed(self) -> float:
        """Magnitude of velocity (m/s)."""
        return float(np.hypot(self.vx, self.vy))

    @property
    def effective_wind(self) -> float:
        """Steady wind plus gust (m/s)."""
        return self.wind_speed + self.wind_gust

    def copy(self) -> 'RocketState':
        """Create an independent copy of the state."""
        return replace(self)

    def __str__(self) -> str:
        return (
            f"RocketState(t={self.t:.2f}s, "
            f"x={self.x:.1f}m, alt={self.y:.1f}m, "
            f"v={self.speed:.1f}m/s, fuel={self.fuel_mass:.1f}kg)"
        )


def apply_config(state: RocketState, config: Optional[RocketConfig] = None) -> RocketState:
    """
    Re-apply vehicle configuration and zero all flight state.

    Wind speed and gust are left untouched.

    Args:
        state: State to reinitialise in place
        config: Vehicle configuration (defaults if None)

    Returns:
        The same state object
    """
    if config is None:
        config = RocketConfig()
    mass, thrust, fuel = config.resolve()

    state.dry_mass = mass
    state.thrust_scale = thrust
    state.fuel_mass = fuel
    state.max_fuel = fuel

    state.x = 0.0
    state.y = 0.0
    state.vx = 0.0
    state.vy = 0.0
    state.angle = C.INITIAL_ANGLE
    state.t = 0.0
    state.launched = False
    state.max_altitude = 0.0
    return state


def create_initial_state(config: Optional[RocketConfig] = None) -> RocketState:
    """
    Create a fresh, unlaunched state for the given configuration.

    Returns:
        RocketState at rest on the ground with no wind.
    """
    return apply_config(RocketState(), config)
