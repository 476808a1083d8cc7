# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Vibrating string simulation with one Warp thread per point

from .sim import Model, State
from .solvers import SolverBase, SolverPointwise, SolverReference
from .driver import simulate, make_solver
from .output import format_values, print_values, save_profile_plot

__all__ = [
    "Model",
    "State",
    "SolverBase",
    "SolverPointwise",
    "SolverReference",
    "simulate",
    "make_solver",
    "format_values",
    "print_values",
    "save_profile_plot",
]
