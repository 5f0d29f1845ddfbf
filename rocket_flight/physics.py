"""
Rocket Flight 2D Simulation - Flight Physics

RocketPhysics owns one RocketState and exposes the operations a driver
(render loop, headless runner, UI layer) calls each frame:

    rocket = create_rocket({'mass': 1200, 'fuel': 150})
    rocket.set_wind(4.0)
    rocket.launch()
    while running:
        rocket.decay_gust()
        rocket.update(frame_dt, throttle)
        telemetry = rocket.get_telemetry()

The instance is owned by the caller; there is no module-level rocket.
"""

import logging
from typing import Mapping, Optional, Union

import numpy as np

from . import constants as C
from .config import RocketConfig
from .state import apply_config, create_initial_state
from .integrators import euler_step
from .mass import is_fuel_exhausted
from .validation import check_step_inputs
from .types import AccelerationBreakdown, Telemetry

logger = logging.getLogger(__name__)

ConfigLike = Union[RocketConfig, Mapping, None]


def _as_rocket_config(config: ConfigLike) -> RocketConfig:
    if config is None:
        return RocketConfig()
    if isinstance(config, RocketConfig):
        return config
    return RocketConfig.from_mapping(config)


class RocketPhysics:
    """2D rocket flight state with a fixed-step integrator."""

    def __init__(self, config: ConfigLike = None, strict: bool = True):
        """
        Args:
            config: RocketConfig or a dict with optional mass/thrust/fuel
            strict: Reject non-finite or negative dt/thrust multiplier
        """
        self.config = _as_rocket_config(config)
        self.strict = strict
        self.state = create_initial_state(self.config)
        self._fuel_out_logged = False
        self._airborne = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def launch(self) -> None:
        """Start the flight clock; position, velocity, fuel and wind are kept."""
        self.state.launched = True
        self.state.t = 0.0
        self.state.max_altitude = 0.0
        logger.info(f"Launch: {self.state}")

    def reset(self, config: ConfigLike = None) -> None:
        """
        Reinitialise the rocket from a configuration.

        Wind speed and gust are preserved across the reset.
        """
        self.config = _as_rocket_config(config)
        apply_config(self.state, self.config)
        self._fuel_out_logged = False
        self._airborne = False
        logger.info(
            f"Reset: dry_mass={self.state.dry_mass:.1f}kg, "
            f"fuel={self.state.fuel_mass:.1f}kg, thrust_scale={self.state.thrust_scale}"
        )

    # ------------------------------------------------------------------
    # Integration
    # ------------------------------------------------------------------

    def update(self, dt: float, thrust_multiplier: float = 1.0) -> Optional[AccelerationBreakdown]:
        """
        Advance the flight by one frame.

        Args:
            dt: Frame time (s); steps longer than MAX_DT are clamped
            thrust_multiplier: Throttle for this frame

        Returns:
            Accelerations applied, or None if the rocket is not launched

        Raises:
            ValidationError: In strict mode, for non-finite or negative inputs
        """
        if not self.state.launched:
            return None
        if self.strict:
            check_step_inputs(dt, thrust_multiplier)

        acc = euler_step(self.state, dt, thrust_multiplier)
        self._log_events()
        return acc

    def _log_events(self) -> None:
        s = self.state
        if not self._fuel_out_logged and is_fuel_exhausted(s.fuel_mass):
            self._fuel_out_logged = True
            logger.info(f"Fuel exhausted at t={s.t:.2f}s, alt={s.y:.1f}m")

        if s.y > C.GROUND_LEVEL:
            self._airborne = True
        elif self._airborne:
            self._airborne = False
            logger.info(f"Ground contact at t={s.t:.2f}s, x={s.x:.1f}m, vx={s.vx:.2f}m/s")

    # ------------------------------------------------------------------
    # Wind
    # ------------------------------------------------------------------

    def set_wind(self, speed: float) -> None:
        """Set the steady horizontal wind speed (m/s)."""
        self.state.wind_speed = speed

    def add_gust_impulse(self, magnitude: float) -> None:
        """Add to the transient gust without decaying it."""
        self.state.wind_gust += magnitude

    def decay_gust(self) -> None:
        """Decay the accumulated gust by one tick (call once per frame)."""
        self.state.wind_gust *= C.GUST_DECAY_FACTOR

    def add_wind_gust(self, magnitude: float) -> None:
        """Add a gust impulse, then decay the total gust by one tick."""
        self.add_gust_impulse(magnitude)
        self.decay_gust()

    # ------------------------------------------------------------------
    # Telemetry
    # ------------------------------------------------------------------

    def get_telemetry(self) -> Telemetry:
        """Display snapshot of the current state; angle 0.0 means straight up."""
        s = self.state
        fuel = max(0.0, s.fuel_mass)
        angle_deg = np.degrees(s.angle) - C.ANGLE_DISPLAY_OFFSET_DEG
        return Telemetry(
            altitude=s.y,
            velocity=float(np.sqrt(s.vx ** 2 + s.vy ** 2)),
            vx=s.vx,
            vy=s.vy,
            fuel=fuel,
            mass=s.dry_mass + fuel,
            time=f"{s.t:.2f}",
            wind_speed=s.wind_speed,
            angle=float(round(angle_deg, 1)),
            max_altitude=s.max_altitude,
            launched=s.launched,
        )

    def __repr__(self) -> str:
        return f"RocketPhysics({self.state})"


def create_rocket(config: ConfigLike = None, strict: bool = True) -> RocketPhysics:
    """Create a new, unlaunched rocket owned by the caller."""
    return RocketPhysics(config, strict=strict)
