# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Solvers module for vibrating string simulations

from .pointwise import SolverPointwise
from .reference import SolverReference
from .solver import SolverBase

__all__ = [
    "SolverBase",
    "SolverPointwise",
    "SolverReference",
]
