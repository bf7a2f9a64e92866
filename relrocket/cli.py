"""
Relativistic Rocket Kinematics - CLI

Entry point for running a constant-acceleration simulation, comparing it
with the closed-form solution and generating plots.
"""

import argparse
import logging
import os
import sys

from . import constants as C
from .config import SimulationConfig
from .main import compare_with_closed_form, run_simulation
from .plotting import generate_all_plots

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Relativistic rocket under constant proper acceleration",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--acceleration", "-a",
        type=float,
        default=C.G,
        help="Proper acceleration (m/s^2)"
    )
    parser.add_argument(
        "--duration-years", "-d",
        type=float,
        default=1.0,
        help="Span to simulate, in years of the chosen clock"
    )
    parser.add_argument(
        "--steps", "-n",
        type=int,
        default=C.DEFAULT_STEPS,
        help="Number of integration steps"
    )
    parser.add_argument(
        "--mode", "-m",
        choices=C.STEP_MODES,
        default=C.STEP_MODE_COORDINATE,
        help="Clock the steps are measured on"
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default="plots",
        help="Directory to save output plots"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress verbose output"
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Skip plot generation"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main execution flow."""
    args = parse_args(argv)

    # Configure verbosity
    if args.quiet:
        logging.getLogger().setLevel(logging.WARNING)

    config = SimulationConfig(
        acceleration=args.acceleration,
        duration=args.duration_years * C.YEAR,
        steps=args.steps,
        step_mode=args.mode,
        log_interval=max(1, args.steps // 500),
        verbose=not args.quiet,
    )

    try:
        final_state, log, reason = run_simulation(config)
        cmp = compare_with_closed_form(final_state, config.acceleration, config.step_mode)

        print("\n" + "=" * 60)
        print("SIMULATION SUMMARY")
        print("=" * 60)
        print(f"Termination reason: {reason}")
        print(f"Coordinate time: {final_state.coordinate_time / C.YEAR:.6f} y "
              f"(closed form {cmp['expected_coordinate_time'] / C.YEAR:.6f} y)")
        print(f"Proper time:     {final_state.proper_time / C.YEAR:.6f} y "
              f"(closed form {cmp['expected_proper_time'] / C.YEAR:.6f} y)")
        print(f"Speed:           {final_state.beta:.10f} c "
              f"(closed form {cmp['expected_coordinate_speed'] / C.C:.10f} c)")
        print(f"Lorentz factor:  {final_state.lorentz_factor:.6f}")
        print(f"Relative errors: t={cmp['coordinate_time_error']:.2e}, "
              f"tau={cmp['proper_time_error']:.2e}, v={cmp['coordinate_speed_error']:.2e}")
        print("=" * 60 + "\n")

        if not args.no_plots and len(log) > 0:
            # Resolve output directory
            if os.path.isabs(args.output_dir):
                plot_dir = args.output_dir
            else:
                plot_dir = os.path.join(os.getcwd(), args.output_dir)

            logger.info(f"Generating plots in {plot_dir}")
            paths = generate_all_plots(log, plot_dir)
            print(f">> Wrote {len(paths)} plots to: {plot_dir}")

    except Exception as e:
        logger.error(f"Simulation failed: {e}", exc_info=True)
        print(f"\n[ERROR] Simulation failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
