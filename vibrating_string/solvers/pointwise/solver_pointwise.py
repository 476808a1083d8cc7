# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Point-parallel Warp solver for the vibrating string

import warp as wp

from ..solver import SolverBase
from .kernels_pointwise import update_points


class SolverPointwise(SolverBase):
    """
    Runs every point of the string in its own Warp thread.

    Initialization and time stepping are fused into a single kernel
    launch with one thread per point. Points do not communicate, so
    the only synchronization is the wait for the launch to finish.

    Example:
        >>> model = Model(tpoints=100, device='cpu')
        >>> solver = SolverPointwise(model)
        >>> state = model.state()
        >>> solver.solve(state, nsteps=500)
        >>> values = state.displacements()
    """

    def solve(self, state, nsteps: int):
        """
        Fill state.values with the final displacement of every point.

        Args:
            state: The State whose results buffer is written
            nsteps: Number of time steps, in [1, MAX_STEPS]

        Returns:
            The same state, after the launch has completed
        """
        model = self.model
        nsteps = self._validate_steps(nsteps)

        wp.launch(
            kernel=update_points,
            dim=model.tpoints,
            inputs=[
                model.tpoints,
                nsteps,
                model.sqtau,
            ],
            outputs=[state.values],
            device=self.device,
        )

        # Single barrier before results are read back
        wp.synchronize_device(self.device)

        self._verify_finite(state)

        return state
