# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Base solver class for vibrating string simulations

import numpy as np

from ..sim.model import MAX_STEPS, check_count


class SolverBase:
    """
    Generic base class for string solvers.

    A solver fills the results buffer of a State with the displacement
    of every point after nsteps updates. Concrete solvers decide how
    the independent per-point work is spread over parallel lanes.

    Features:
        - Step count validation shared by all backends
        - Optional finite check on the final displacements
    """

    def __init__(self, model, check_finite: bool = False):
        """
        Initialize the solver with a model.

        Args:
            model: The string Model object
            check_finite: If True, raise FloatingPointError when a final
                displacement is NaN or infinite
        """
        self.model = model
        self.check_finite = check_finite

    @property
    def device(self):
        """
        Get the device used by the solver.

        Returns:
            The device used by the solver
        """
        return self.model.device

    def solve(self, state, nsteps: int):
        """
        Run every point of the string for nsteps updates.

        Must be implemented by concrete solver subclasses.

        Args:
            state: The State whose results buffer is written
            nsteps: Number of time steps
        """
        raise NotImplementedError("Concrete solvers must implement solve()")

    def _validate_steps(self, nsteps: int) -> int:
        return check_count("nsteps", nsteps, 1, MAX_STEPS)

    def _verify_finite(self, state):
        """Raise FloatingPointError if any final displacement is not finite."""
        if not self.check_finite:
            return

        values = state.displacements()
        bad = np.flatnonzero(~np.isfinite(values))
        if len(bad) > 0:
            # Report 1-based point indices
            raise FloatingPointError(
                f"{len(bad)} non-finite displacement(s), first at point {bad[0] + 1}"
            )
