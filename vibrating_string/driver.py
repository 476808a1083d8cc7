# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Host-side driver: build the model, run a solver, read back results

import numpy as np

from .sim import Model
from .solvers import SolverPointwise, SolverReference


BACKENDS = {
    "warp": SolverPointwise,
    "numpy": SolverReference,
}


def make_solver(model, backend: str = "warp", check_finite: bool = False):
    """
    Create the solver registered under ``backend``.

    Args:
        model: The string Model
        backend: 'warp' (one Warp thread per point) or 'numpy' (host reference)
        check_finite: Passed to the solver

    Returns:
        SolverBase: The solver instance
    """
    try:
        solver_cls = BACKENDS[backend]
    except KeyError:
        raise ValueError(
            f"Unknown backend '{backend}', expected one of {sorted(BACKENDS)}"
        ) from None
    return solver_cls(model, check_finite=check_finite)


def simulate(tpoints: int, nsteps: int, device=None, backend: str = "warp",
             check_finite: bool = False) -> np.ndarray:
    """
    Compute the displacement of every point after nsteps time steps.

    Args:
        tpoints: Number of points along the string, in [20, 1000000]
        nsteps: Number of time steps, in [1, 1000000]
        device: Warp device for the results buffer (None = preferred device)
        backend: Solver backend name, see BACKENDS
        check_finite: Raise FloatingPointError on NaN/inf results

    Returns:
        np.ndarray: shape [tpoints], position i holds point i + 1
    """
    model = Model(tpoints, device=device)
    solver = make_solver(model, backend=backend, check_finite=check_finite)

    state = model.state()
    solver.solve(state, nsteps)

    return state.displacements()
