# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Per-point kernels for the vibrating string

import warp as wp


@wp.func
def initial_displacement(idx: int, tpoints: int) -> float:
    """
    Sine profile sampled at point idx (1-based).

    x = (idx - 1) / (tpoints - 1) runs from 0 at the first point
    to 1 at the last one.
    """
    x = float(idx - 1) / float(tpoints - 1)
    return wp.sin(2.0 * wp.pi * x)


@wp.func
def advance_displacement(now: float, old: float, sqtau: float) -> float:
    """
    One update of the local recurrence.

    next = 2 * now - old + tau^2 * (-2) * now
    """
    return 2.0 * now - old + sqtau * (-2.0) * now


@wp.kernel
def update_points(
    tpoints: int,
    nsteps: int,
    sqtau: float,
    values: wp.array(dtype=float),
):
    """
    Initialize and advance one point of the string for all time steps.

    Each thread processes one point and writes only values[idx], so
    threads never touch each other's slots. Boundary points run the
    same loop and are pinned to zero afterwards.
    """
    tid = wp.tid()
    idx = tid + 1

    now = initial_displacement(idx, tpoints)
    old = now

    for step in range(nsteps):
        new = advance_displacement(now, old, sqtau)
        old = now
        now = new

    # Endpoints of the string are fixed
    if idx == 1 or idx == tpoints:
        now = 0.0

    values[idx] = now
