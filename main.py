#!/usr/bin/env python3
"""
Projectile Hex Trajectory: Main Runner
======================================

  1. Read v0 and launch angle (degrees) from stdin
  2. Sample the trajectory and print it in hex
  3. Save the launch parameters to a file
  4. Restore them into a new projectile, recompute and print again

  Usage:
    python main.py                        # defaults: T=2 s, step=0.1 s
    python main.py --plot outputs/traj.png
    python main.py --file data.ser --total-time 5 --step 0.25
"""

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from motion.integrator import TrajectoryConfigError, validate_time_grid
from motion.log import get_logger
from motion.persistence import DEFAULT_DATA_FILE, MotionDataFormatError, save, load
from motion.projectile import Projectile
from motion.visualization import plot_trajectory

import matplotlib.pyplot as plt


DEFAULT_TOTAL_TIME = 2.0     # s
DEFAULT_STEP       = 0.1     # s

logger = get_logger("motion.cli")


def build_parser():
    parser = argparse.ArgumentParser(
        description="Sample a projectile trajectory, print it in hex and "
                    "round-trip its launch parameters through a file")
    parser.add_argument("--file", type=str, default=DEFAULT_DATA_FILE,
                        help="Where to save the launch parameters")
    parser.add_argument("--total-time", type=float, default=DEFAULT_TOTAL_TIME,
                        help="Last sample time in seconds")
    parser.add_argument("--step", type=float, default=DEFAULT_STEP,
                        help="Time between samples in seconds (> 0)")
    parser.add_argument("--plot", type=str, default=None,
                        help="Also save a PNG plot of the trajectory here")
    return parser


def read_launch_parameters(stream=None):
    """Prompt for 'v0 alpha' and return them as floats."""
    stream = stream if stream is not None else sys.stdin
    print("Enter v0 and angle α separated by a space: ", end="", flush=True)
    tokens = []
    for line in stream:
        tokens.extend(line.split())
        if len(tokens) >= 2:
            break
    if len(tokens) < 2:
        raise ValueError("expected two numbers: v0 and angle")
    return float(tokens[0]), float(tokens[1])


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        validate_time_grid(args.total_time, args.step)
    except TrajectoryConfigError as exc:
        parser.error(str(exc))

    try:
        v0, alpha_deg = read_launch_parameters()
    except ValueError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 1

    data = Projectile.from_degrees(v0, alpha_deg)
    data.calculate(args.total_time, args.step)
    print("Trajectory (HEX):")
    data.print_hex_trajectory()

    if args.plot:
        try:
            fig = plot_trajectory(data, save_path=args.plot)
            plt.close(fig)
            print(f"Plot saved to {args.plot}")
        except (ValueError, OSError) as exc:
            print(f"Plot skipped: {exc}", file=sys.stderr)

    try:
        save(data, args.file)
        print("Data saved to file.")

        loaded = load(args.file)
        print("Object restored. Recomputing:")
        loaded.calculate(args.total_time, args.step)
        loaded.print_hex_trajectory()
    except (OSError, MotionDataFormatError) as exc:
        logger.debug("persistence round-trip failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
