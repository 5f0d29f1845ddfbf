"""
Wind and fuel dispersion report for the 2D rocket flight.
"""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
import sys

if __package__ in (None, ""):
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from rocket_flight.config import RocketConfig, SimulationConfig
from rocket_flight.montecarlo import run_monte_carlo


def _reason_counts(results):
    return Counter(run.final_reason for run in results.runs)


def _worst_runs(results, attr: str, n: int = 3):
    return sorted(results.runs, key=lambda r: abs(getattr(r, attr)), reverse=True)[:n]


def main() -> int:
    parser = argparse.ArgumentParser(description="Wind/fuel dispersion report")
    parser.add_argument("--runs", type=int, default=50)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--wind", type=float, default=0.0, help="Nominal wind (m/s)")
    parser.add_argument("--wind-sigma", type=float, default=3.0)
    parser.add_argument("--fuel-sigma", type=float, default=0.05)
    parser.add_argument("--fuel", type=float, default=None, help="Nominal fuel load (kg)")
    parser.add_argument("--launch-angle", type=float, default=0.0,
                        help="Initial orientation in rad from vertical")
    args = parser.parse_args()

    base = SimulationConfig(
        launch_angle=args.launch_angle,
        wind_speed=args.wind,
        mc_wind_dispersion=args.wind_sigma,
        mc_fuel_dispersion=args.fuel_sigma,
        verbose=False,
    )
    results = run_monte_carlo(base, RocketConfig(fuel=args.fuel),
                              n_runs=args.runs, seed=args.seed, verbose=False)

    print(results.summary())
    print()
    print("Termination reasons:")
    for reason, count in _reason_counts(results).most_common():
        print(f"  {count:4d}  {reason}")
    print()
    print("Largest downrange drift:")
    for run in _worst_runs(results, 'downrange_m'):
        print(f"  run {run.run_index:3d} | x={run.downrange_m:9.1f} m | "
              f"wind={run.dispersions_applied['wind_speed_ms']:6.2f} m/s | "
              f"fuel x{run.dispersions_applied['fuel_scale']:.3f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
