# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0

from .solver_pointwise import SolverPointwise
from .kernels_pointwise import (
    advance_displacement,
    initial_displacement,
    update_points,
)

__all__ = [
    "SolverPointwise",
    "advance_displacement",
    "initial_displacement",
    "update_points",
]
