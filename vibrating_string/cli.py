#!/usr/bin/env python3
# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
"""
Command-line entry point for the vibrating string simulation.

Usage:
    vibrating-string TPOINTS NSTEPS
    vibrating-string 1000 500 --device cpu
    vibrating-string 1000 500 --backend numpy --plot string.png

Out-of-range or non-numeric counts are asked for again on standard
input until a valid value is entered.
"""

import sys
import time
import argparse

import warp as wp

from .driver import BACKENDS, make_solver
from .output import print_values, save_profile_plot
from .sim import Model, MIN_POINTS, MAX_POINTS, MAX_STEPS


class _UsageParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser():
    parser = _UsageParser(
        prog="vibrating-string",
        description="Vibrating string simulation, one parallel worker per point",
    )
    parser.add_argument('tpoints', type=str,
                        help=f'Number of points along the string [{MIN_POINTS}-{MAX_POINTS}]')
    parser.add_argument('nsteps', type=str,
                        help=f'Number of time steps [1-{MAX_STEPS}]')
    parser.add_argument('--device', type=str, default=None,
                        help='Warp device, e.g. cpu or cuda:0 (default: Warp preferred device)')
    parser.add_argument('--backend', type=str, default='warp', choices=sorted(BACKENDS),
                        help='Solver backend (default: warp)')
    parser.add_argument('--check-finite', action='store_true',
                        help='Fail if any final displacement is NaN or infinite')
    parser.add_argument('--plot', type=str, default=None, metavar='PATH',
                        help='Also save a plot of the final profile to PATH')
    return parser


def _parse_count(text, low, high):
    """Return text as an int in [low, high], or None."""
    try:
        value = int(str(text).strip())
    except ValueError:
        return None
    if low <= value <= high:
        return value
    return None


def read_count(text, low, high, prompt, input_fn=input):
    """
    Validate a count, reprompting until it lies in [low, high].

    Args:
        text: Initial value (usually from the command line)
        low, high: Inclusive bounds
        prompt: Message shown before each new attempt
        input_fn: Line reader, raises EOFError when input is exhausted

    Returns:
        int: The validated count
    """
    value = _parse_count(text, low, high)
    while value is None:
        value = _parse_count(input_fn(prompt), low, high)
    return value


def main(argv=None, input_fn=input):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        tpoints = read_count(
            args.tpoints, MIN_POINTS, MAX_POINTS,
            f"Enter number of points along vibrating string [{MIN_POINTS}-{MAX_POINTS}]: ",
            input_fn,
        )
        nsteps = read_count(
            args.nsteps, 1, MAX_STEPS,
            f"Enter number of time steps [1-{MAX_STEPS}]: ",
            input_fn,
        )
    except EOFError:
        print("\n✗ No valid input, aborting", file=sys.stderr)
        return 1

    # Initialize Warp
    wp.init()

    print(f"Using points = {tpoints}, steps = {nsteps}")
    print("Initializing points for line equation...")

    try:
        model = Model(tpoints, device=args.device)
        solver = make_solver(model, backend=args.backend, check_finite=args.check_finite)
        state = model.state()

        print("Updating all points for all time steps...")
        start = time.time()
        solver.solve(state, nsteps)
        elapsed_ms = (time.time() - start) * 1_000

        values = state.displacements()
    except (MemoryError, RuntimeError) as e:
        # Allocation or launch failure: nothing usable was produced
        print(f"✗ Simulation failed: {e}", file=sys.stderr)
        return 1
    except FloatingPointError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    print(f"✓ Updated {tpoints} points x {nsteps} steps on {model.device} "
          f"({args.backend}) in {elapsed_ms:.2f} ms")

    print("Printing final results...")
    print_values(values)

    if args.plot:
        save_profile_plot(values, args.plot)

    print("\nDone.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
