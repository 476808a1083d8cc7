# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Host reference solver for the vibrating string (numpy)

import numpy as np

from ..solver import SolverBase


def initial_displacements(tpoints: int) -> np.ndarray:
    """
    Sine profile for points 1..tpoints, as float32.

    Returns:
        np.ndarray: shape [tpoints], position i holds point i + 1
    """
    idx = np.arange(1, tpoints + 1, dtype=np.float32)
    x = (idx - np.float32(1.0)) / np.float32(tpoints - 1)
    return np.sin(np.float32(2.0 * np.pi) * x).astype(np.float32)


class SolverReference(SolverBase):
    """
    Vectorized host version of the per-point recurrence.

    All points advance together as numpy arrays, one array operation
    per time step. Arithmetic is done in float32 in the same order as
    the Warp kernel, so results agree with SolverPointwise up to the
    rounding of sin() and fused multiply-adds.
    """

    def solve(self, state, nsteps: int):
        """
        Fill state.values with the final displacement of every point.

        Args:
            state: The State whose results buffer is written
            nsteps: Number of time steps, in [1, MAX_STEPS]

        Returns:
            The same state
        """
        model = self.model
        nsteps = self._validate_steps(nsteps)

        sqtau = np.float32(model.sqtau)
        two = np.float32(2.0)
        minus_two = np.float32(-2.0)

        now = initial_displacements(model.tpoints)
        old = now.copy()

        for _ in range(nsteps):
            new = two * now - old + sqtau * minus_two * now
            old = now
            now = new

        # Endpoints of the string are fixed
        now[0] = 0.0
        now[-1] = 0.0

        padded = np.zeros(model.tpoints + 2, dtype=np.float32)
        padded[1:model.tpoints + 1] = now

        # Copy host result into the device buffer
        state.values.assign(padded)

        self._verify_finite(state)

        return state
