"""
Rocket Flight 2D Simulation - Headless Driver

This module implements a fixed-rate driver loop around RocketPhysics:
- Per-frame gust decay and optional stochastic gust impulses
- Throttle schedule (constant throttle until burn_time)
- Data logging with CSV export
- Termination on landing, time limit or validation failure

Coordinate frame: x horizontal (downrange), y vertical (altitude), both
in metres from the launch point.
"""

import csv
import logging
import os
import time
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from . import constants as C
from .config import RocketConfig, SimulationConfig, create_default_config
from .physics import RocketPhysics
from .mass import is_fuel_exhausted
from .validation import validate_state, ValidationError
from .types import AccelerationBreakdown

logger = logging.getLogger(__name__)


@dataclass
class SimulationLog:
    """Container for logged simulation data."""
    time: List[float] = field(default_factory=list)
    x: List[float] = field(default_factory=list)
    altitude: List[float] = field(default_factory=list)
    vx: List[float] = field(default_factory=list)
    vy: List[float] = field(default_factory=list)
    speed: List[float] = field(default_factory=list)
    fuel: List[float] = field(default_factory=list)
    mass: List[float] = field(default_factory=list)
    angle_deg: List[float] = field(default_factory=list)
    wind_speed: List[float] = field(default_factory=list)
    wind_gust: List[float] = field(default_factory=list)
    throttle: List[float] = field(default_factory=list)
    thrust_ax: List[float] = field(default_factory=list)
    thrust_ay: List[float] = field(default_factory=list)
    wind_ax: List[float] = field(default_factory=list)
    drag_ax: List[float] = field(default_factory=list)
    drag_ay: List[float] = field(default_factory=list)
    gravity_ay: List[float] = field(default_factory=list)
    net_ay: List[float] = field(default_factory=list)
    max_altitude: List[float] = field(default_factory=list)

    def append(self, physics: RocketPhysics, acc: AccelerationBreakdown, throttle: float):
        """Log data from current timestep."""
        s = physics.state
        telemetry = physics.get_telemetry()
        self.time.append(s.t)
        self.x.append(s.x)
        self.altitude.append(s.y)
        self.vx.append(s.vx)
        self.vy.append(s.vy)
        self.speed.append(telemetry['velocity'])
        self.fuel.append(telemetry['fuel'])
        self.mass.append(telemetry['mass'])
        # Unrounded display angle
        self.angle_deg.append(float(np.degrees(s.angle)) - C.ANGLE_DISPLAY_OFFSET_DEG)
        self.wind_speed.append(s.wind_speed)
        self.wind_gust.append(s.wind_gust)
        self.throttle.append(throttle)
        self.thrust_ax.append(acc['thrust_x'])
        self.thrust_ay.append(acc['thrust_y'])
        self.wind_ax.append(acc['wind_x'])
        self.drag_ax.append(acc['drag_x'])
        self.drag_ay.append(acc['drag_y'])
        self.gravity_ay.append(acc['gravity_y'])
        self.net_ay.append(acc['net_y'])
        self.max_altitude.append(s.max_altitude)

    def __len__(self) -> int:
        return len(self.time)

    def to_csv(self, filename: str):
        """Write logged data to CSV for offline analysis."""
        os.makedirs(os.path.dirname(filename) or '.', exist_ok=True)
        header = [
            'time', 'x', 'altitude', 'vx', 'vy', 'speed', 'fuel', 'mass',
            'angle_deg', 'wind_speed', 'wind_gust', 'throttle',
            'thrust_ax', 'thrust_ay', 'wind_ax', 'drag_ax', 'drag_ay',
            'gravity_ay', 'net_ay', 'max_altitude',
        ]
        columns = [
            self.time, self.x, self.altitude, self.vx, self.vy, self.speed,
            self.fuel, self.mass, self.angle_deg, self.wind_speed, self.wind_gust,
            self.throttle, self.thrust_ax, self.thrust_ay, self.wind_ax,
            self.drag_ax, self.drag_ay, self.gravity_ay, self.net_ay,
            self.max_altitude,
        ]

        with open(filename, 'w', newline='') as fh:
            writer = csv.writer(fh)
            writer.writerow(header)
            for row in zip(*columns):
                writer.writerow(row)
        logger.info(f"Wrote {len(self.time)} rows to {filename}")


def throttle_at(t: float, config: SimulationConfig) -> float:
    """Throttle schedule: constant until burn_time, then engine off."""
    if t < config.burn_time:
        return config.throttle
    return 0.0


def check_termination(physics: RocketPhysics, max_time: float,
                      config: SimulationConfig = None) -> tuple:
    """
    Check whether the run should end.

    Returns:
        (should_terminate, reason)
    """
    if config is None:
        config = create_default_config()
    s = physics.state

    if s.t >= max_time - 1e-9:
        return True, "Maximum simulation time reached"

    engine_off = is_fuel_exhausted(s.fuel_mass) or throttle_at(s.t, config) <= 0.0
    on_ground = s.y <= C.GROUND_LEVEL
    if (s.launched and engine_off and on_ground
            and s.t >= config.min_flight_time
            and s.speed < config.landed_speed_threshold):
        return True, "Landed"

    return False, ""


def run_simulation(rocket_config: Optional[RocketConfig] = None,
                   config: SimulationConfig = None,
                   dt: float = None, max_time: float = None,
                   verbose: bool = None) -> tuple:
    """
    Launch a rocket and drive it until it lands or time runs out.

    Args:
        rocket_config: Vehicle configuration (defaults if None)
        config: Driver configuration. If None a default is created.
        dt: Frame time. Overrides config.dt if given.
        max_time: Time limit. Overrides config.max_time if given.
        verbose: Print progress rows. Overrides config.verbose if given.

    Returns:
        (physics, log, termination_reason) tuple

    Raises:
        ValueError: If dt is not positive
    """
    if config is None:
        config = create_default_config()
    if dt is None:
        dt = config.dt
    if max_time is None:
        max_time = config.max_time
    if verbose is None:
        verbose = config.verbose

    if dt <= 0:
        raise ValueError(f"Time step dt must be positive, got {dt}")

    physics = RocketPhysics(rocket_config, strict=config.strict_inputs)
    physics.set_wind(config.wind_speed)
    physics.state.angle = config.launch_angle
    rng = np.random.default_rng(config.seed)
    log = SimulationLog()

    logger.info(f"Starting simulation: dt={dt:.4f}s, max_time={max_time}s, "
                f"wind={config.wind_speed}m/s, throttle={config.throttle}, "
                f"launch_angle={config.launch_angle:.3f}rad")

    if verbose:
        print("\n" + "=" * 72)
        print(f"ROCKET FLIGHT SIMULATION    | dt={dt:.4f}s | T_max={max_time}s")
        print("=" * 72)
        print(f"{'Time (s)':^10} | {'X (m)':^10} | {'Alt (m)':^10} | "
              f"{'Vel (m/s)':^10} | {'Fuel (kg)':^10}")
        print("-" * 72)

    physics.launch()
    start_time = time.time()
    steps = 0
    last_print_time = -C.PRINT_INTERVAL

    while True:
        should_terminate, reason = check_termination(physics, max_time, config)
        if should_terminate:
            break

        try:
            validate_state(physics.state)
        except ValidationError as e:
            logger.error(f"Validation failed: {e}")
            reason = f"Validation failure: {e}"
            break

        if config.enable_stochastic_wind:
            physics.add_gust_impulse(float(rng.normal(0.0, config.wind_gust_sigma)))
        physics.decay_gust()

        throttle = throttle_at(physics.state.t, config)
        acc = physics.update(dt, throttle)
        log.append(physics, acc, throttle)
        steps += 1

        if verbose and physics.state.t - last_print_time >= C.PRINT_INTERVAL:
            _print_status(physics)
            last_print_time = physics.state.t

    logger.info(f"Simulation terminated: {reason}")
    _log_completion(physics, steps, time.time() - start_time, reason, verbose)
    return physics, log, reason


def _print_status(physics: RocketPhysics):
    """Print a formatted status row."""
    s = physics.state
    msg = (f"{s.t:10.2f} | {s.x:10.1f} | {s.y:10.1f} | "
           f"{s.speed:10.1f} | {s.fuel_mass:10.1f}")
    print(msg)
    logger.debug(msg)


def _log_completion(physics: RocketPhysics, steps: int, elapsed: float,
                    reason: str, verbose: bool):
    """Log and print run statistics."""
    s = physics.state
    logger.info(f"Simulation complete: {steps} steps in {elapsed:.2f}s")
    logger.info(f"Final state: {s}, max_alt={s.max_altitude:.1f}m")

    if verbose:
        print("-" * 72)
        print(f"Termination:  {reason}")
        print(f"Flight Time:  {s.t:.2f} s")
        print(f"Downrange:    {s.x:.1f} m")
        print(f"Max Altitude: {s.max_altitude:.1f} m")
        print(f"Fuel Left:    {s.fuel_mass:.1f} kg")
        print(f"Steps:        {steps:,}")
        print("=" * 72)
