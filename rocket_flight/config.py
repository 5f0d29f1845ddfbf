"""
Rocket Flight 2D Simulation - Configuration

This module provides two frozen dataclasses:

- RocketConfig: vehicle parameters (dry mass, thrust scale, fuel load)
  with explicit default resolution.
- SimulationConfig: parameters of the headless driver (timing, throttle
  schedule, wind, dispersions).

Fields left as None fall back to the defaults in constants.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from . import constants as C


_DEFAULTS = {
    'mass': C.DEFAULT_DRY_MASS,
    'thrust': C.DEFAULT_THRUST_SCALE,
    'fuel': C.DEFAULT_FUEL_MASS,
}


@dataclass(frozen=True)
class RocketConfig:
    """
    Vehicle configuration.

    Attributes:
        mass: Dry mass (kg). None -> DEFAULT_DRY_MASS.
        thrust: Nominal thrust scale. None -> DEFAULT_THRUST_SCALE.
        fuel: Initial fuel load and tank capacity (kg). None -> DEFAULT_FUEL_MASS.
        falsy_defaults: If True, any falsy value (0 or None) is replaced by
            its default.
    """

    mass: Optional[float] = None
    thrust: Optional[float] = None
    fuel: Optional[float] = None
    falsy_defaults: bool = False

    def __post_init__(self):
        if self.falsy_defaults:
            return
        if self.mass is not None and self.mass <= 0:
            raise ValueError(f"Dry mass must be positive, got {self.mass}")
        if self.fuel is not None and self.fuel < 0:
            raise ValueError(f"Fuel load must be non-negative, got {self.fuel}")

    def _resolve_field(self, name: str) -> float:
        value = getattr(self, name)
        if self.falsy_defaults:
            return float(value or _DEFAULTS[name])
        if value is None:
            return float(_DEFAULTS[name])
        return float(value)

    def resolve(self) -> Tuple[float, float, float]:
        """Return the concrete (mass, thrust, fuel) triple."""
        return (
            self._resolve_field('mass'),
            self._resolve_field('thrust'),
            self._resolve_field('fuel'),
        )

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping] = None,
                     falsy_defaults: bool = False) -> 'RocketConfig':
        """Build a config from a plain dict; unknown keys are ignored."""
        mapping = mapping or {}
        return cls(
            mass=mapping.get('mass'),
            thrust=mapping.get('thrust'),
            fuel=mapping.get('fuel'),
            falsy_defaults=falsy_defaults,
        )


@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable configuration for the headless driver.

    Section grouping:
      1. Simulation timing
      2. Launch attitude and throttle schedule
      3. Wind
      4. Termination
      5. Input checks
      6. Monte Carlo
      7. Misc
    """

    # ── 1. Simulation timing ─────────────────────────────────────────────
    dt: float = C.DT
    max_time: float = C.MAX_TIME

    # ── 2. Launch attitude and throttle schedule ─────────────────────────
    launch_angle: float = C.INITIAL_ANGLE  # rad from vertical; 0 = straight up
    throttle: float = 1.0               # thrust multiplier while burning
    burn_time: float = float('inf')     # s, throttle drops to 0 afterwards

    # ── 3. Wind ──────────────────────────────────────────────────────────
    wind_speed: float = 0.0             # m/s steady horizontal wind
    enable_stochastic_wind: bool = False
    wind_gust_sigma: float = C.WIND_GUST_SIGMA  # m/s per-frame impulse
    seed: Optional[int] = None

    # ── 4. Termination ───────────────────────────────────────────────────
    landed_speed_threshold: float = C.LANDED_SPEED_THRESHOLD
    min_flight_time: float = C.MIN_FLIGHT_TIME

    # ── 5. Input checks ──────────────────────────────────────────────────
    strict_inputs: bool = True

    # ── 6. Monte Carlo ───────────────────────────────────────────────────
    mc_wind_dispersion: float = 3.0     # m/s (1-sigma)
    mc_fuel_dispersion: float = 0.05    # fraction (1-sigma)

    # ── 7. Misc ──────────────────────────────────────────────────────────
    verbose: bool = True


def create_default_config() -> SimulationConfig:
    """Create a SimulationConfig with default values from constants."""
    return SimulationConfig()


def create_test_config(dt: float = 0.05, max_time: float = 5.0,
                       **overrides) -> SimulationConfig:
    """Create a fast config suitable for testing.

    Any keyword arg accepted by SimulationConfig can be passed as an override.
    """
    defaults = dict(dt=dt, max_time=max_time, verbose=False)
    defaults.update(overrides)
    return SimulationConfig(**defaults)
