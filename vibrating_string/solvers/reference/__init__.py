# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0

from .solver_reference import SolverReference, initial_displacements

__all__ = [
    "SolverReference",
    "initial_displacements",
]
