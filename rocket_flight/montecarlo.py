"""
Rocket Flight 2D Simulation - Monte Carlo Dispersion Analysis

Runs the headless driver repeatedly with dispersed steady wind speed and
fuel load, and collects flight statistics across the campaign.
"""

import logging
import time
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Optional

import numpy as np

from .config import RocketConfig, SimulationConfig, create_default_config

logger = logging.getLogger(__name__)


@dataclass
class MCRunResult:
    """Result from a single Monte Carlo run."""
    run_index: int
    seed: int
    max_altitude_m: float
    downrange_m: float
    flight_time_s: float
    fuel_remaining_kg: float
    final_reason: str
    dispersions_applied: Dict[str, float] = field(default_factory=dict)


@dataclass
class MCResults:
    """Aggregated results from a Monte Carlo campaign."""
    runs: List[MCRunResult] = field(default_factory=list)
    config: Optional[SimulationConfig] = None
    wall_time_s: float = 0.0

    @property
    def n_runs(self) -> int:
        return len(self.runs)

    def get_statistic(self, attr: str) -> dict:
        """Compute mean/std/min/max for a scalar attribute across runs."""
        values = [getattr(r, attr) for r in self.runs if hasattr(r, attr)]
        if not values:
            return {'mean': 0, 'std': 0, 'min': 0, 'max': 0}
        arr = np.array(values)
        return {
            'mean': float(np.mean(arr)),
            'std': float(np.std(arr)),
            'min': float(np.min(arr)),
            'max': float(np.max(arr)),
        }

    def summary(self) -> str:
        """Return a formatted summary string."""
        lines = [f"Monte Carlo Results: {self.n_runs} runs in {self.wall_time_s:.1f}s"]
        for attr in ['max_altitude_m', 'downrange_m', 'flight_time_s', 'fuel_remaining_kg']:
            stats = self.get_statistic(attr)
            lines.append(f"  {attr:20s}: mean={stats['mean']:.2f} std={stats['std']:.2f} "
                         f"min={stats['min']:.2f} max={stats['max']:.2f}")
        return '\n'.join(lines)


def run_monte_carlo(base_config: SimulationConfig = None,
                    rocket_config: RocketConfig = None,
                    n_runs: int = 100,
                    seed: int = 42,
                    run_function: Callable = None,
                    verbose: bool = True) -> MCResults:
    """
    Run a wind/fuel dispersion campaign.

    Args:
        base_config: Driver configuration holding the dispersion sigmas
        rocket_config: Nominal vehicle configuration
        n_runs: Number of runs
        seed: Master random seed
        run_function: Callable(rocket_config, sim_config) -> (physics, log, reason).
                      If None, uses run_simulation from main.
        verbose: Print progress

    Returns:
        MCResults with per-run data and statistics
    """
    if base_config is None:
        base_config = create_default_config()
    if rocket_config is None:
        rocket_config = RocketConfig()

    if run_function is None:
        from .main import run_simulation

        def run_function(rc, sc):
            return run_simulation(rocket_config=rc, config=sc, verbose=False)

    nominal_mass, nominal_thrust, nominal_fuel = rocket_config.resolve()
    rng = np.random.default_rng(seed)
    results = MCResults(config=base_config)
    start = time.time()

    for i in range(n_runs):
        run_seed = int(rng.integers(0, 2**31))

        wind = base_config.wind_speed + rng.normal(0, base_config.mc_wind_dispersion)
        fuel_scale = max(0.0, 1.0 + rng.normal(0, base_config.mc_fuel_dispersion))
        dispersions = {
            'wind_speed_ms': float(wind),
            'fuel_scale': float(fuel_scale),
        }

        run_rocket = RocketConfig(mass=nominal_mass, thrust=nominal_thrust,
                                  fuel=nominal_fuel * fuel_scale)
        run_config = replace(base_config, wind_speed=float(wind), seed=run_seed,
                             verbose=False)

        physics, log, reason = run_function(run_rocket, run_config)
        s = physics.state
        results.runs.append(MCRunResult(
            run_index=i,
            seed=run_seed,
            max_altitude_m=float(s.max_altitude),
            downrange_m=float(s.x),
            flight_time_s=float(s.t),
            fuel_remaining_kg=float(s.fuel_mass),
            final_reason=reason or "unknown",
            dispersions_applied=dispersions,
        ))

        if verbose and (i + 1) % max(1, n_runs // 10) == 0:
            elapsed = time.time() - start
            print(f"  MC run {i+1}/{n_runs} ({elapsed:.1f}s)")

    results.wall_time_s = time.time() - start
    logger.info(f"Monte Carlo campaign finished: {n_runs} runs in {results.wall_time_s:.1f}s")

    if verbose:
        print(results.summary())

    return results
