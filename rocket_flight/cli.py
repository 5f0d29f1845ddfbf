"""
Rocket Flight 2D Simulation - CLI

Single entry point for running a headless flight, exporting the log and
generating summary plots.
"""

import argparse
import logging
import os
import sys

from rocket_flight import constants as C
from rocket_flight.config import RocketConfig, SimulationConfig
from rocket_flight.main import run_simulation
from rocket_flight.mass import get_fuel_fraction
from rocket_flight.plotting import generate_all_plots

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="2D rocket flight simulation",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--mass", type=float, default=None,
                        help=f"Dry mass in kg (default {C.DEFAULT_DRY_MASS})")
    parser.add_argument("--thrust", type=float, default=None,
                        help=f"Nominal thrust scale (default {C.DEFAULT_THRUST_SCALE})")
    parser.add_argument("--fuel", type=float, default=None,
                        help=f"Fuel load in kg (default {C.DEFAULT_FUEL_MASS})")
    parser.add_argument("--wind", type=float, default=0.0,
                        help="Steady horizontal wind speed (m/s)")
    parser.add_argument("--gust-sigma", type=float, default=None,
                        help="Enable stochastic gusts with this 1-sigma impulse (m/s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for stochastic gusts")
    parser.add_argument("--launch-angle", type=float, default=C.INITIAL_ANGLE,
                        help="Initial orientation in rad from vertical (0 = straight up)")
    parser.add_argument("--throttle", type=float, default=1.0,
                        help="Thrust multiplier while burning")
    parser.add_argument("--burn-time", type=float, default=float('inf'),
                        help="Seconds of powered flight before engine cut-off")
    parser.add_argument("--dt", type=float, default=C.DT,
                        help="Frame time (s)")
    parser.add_argument("--max-time", type=float, default=C.MAX_TIME,
                        help="Maximum simulation time (s)")
    parser.add_argument("--csv", type=str, default=None,
                        help="Write the flight log to this CSV file")
    parser.add_argument("--output-dir", "-o", type=str, default="plots",
                        help="Directory to save output plots")
    parser.add_argument("--no-plots", action="store_true",
                        help="Skip plot generation")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Suppress verbose output")
    return parser.parse_args(argv)


def build_configs(args) -> tuple:
    """Translate parsed arguments into (RocketConfig, SimulationConfig)."""
    rocket_config = RocketConfig(mass=args.mass, thrust=args.thrust, fuel=args.fuel)
    sim_config = SimulationConfig(
        dt=args.dt,
        max_time=args.max_time,
        launch_angle=args.launch_angle,
        throttle=args.throttle,
        burn_time=args.burn_time,
        wind_speed=args.wind,
        enable_stochastic_wind=args.gust_sigma is not None,
        wind_gust_sigma=args.gust_sigma if args.gust_sigma is not None else C.WIND_GUST_SIGMA,
        seed=args.seed,
        verbose=not args.quiet,
    )
    return rocket_config, sim_config


def main(argv=None):
    """Main execution flow."""
    args = parse_args(argv)

    if args.quiet:
        logging.getLogger('rocket_flight').setLevel(logging.WARNING)

    try:
        rocket_config, sim_config = build_configs(args)

        logger.info("Starting simulation...")
        physics, log, reason = run_simulation(rocket_config=rocket_config, config=sim_config)

        telemetry = physics.get_telemetry()
        print("\n" + "=" * 60)
        print("FLIGHT SUMMARY")
        print("=" * 60)
        print(f"Termination reason: {reason}")
        print(f"Flight time:  {telemetry['time']} s")
        print(f"Max altitude: {telemetry['max_altitude']:.1f} m")
        print(f"Downrange:    {physics.state.x:.1f} m")
        fraction = get_fuel_fraction(telemetry['fuel'], physics.state.max_fuel)
        print(f"Fuel left:    {telemetry['fuel']:.1f} kg ({fraction:.0%} of tank)")
        print("=" * 60 + "\n")

        if args.csv:
            log.to_csv(args.csv)

        if not args.no_plots and len(log.time) > 0:
            if os.path.isabs(args.output_dir):
                plot_dir = args.output_dir
            else:
                plot_dir = os.path.join(os.getcwd(), args.output_dir)

            logger.info(f"Generating plots in {plot_dir}")
            saved = generate_all_plots(log, plot_dir)
            print(f">> {len(saved)} plots written to: {plot_dir}")

    except Exception as e:
        logger.error(f"Simulation failed: {e}", exc_info=True)
        print(f"\n[ERROR] Simulation failed: {e}")
        sys.exit(1)

    return 0


if __name__ == "__main__":
    main()
