# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0

from .state import State
from .model import Model, C, DT, DX, MIN_POINTS, MAX_POINTS, MAX_STEPS

__all__ = [
    "Model",
    "State",
    "C",
    "DT",
    "DX",
    "MIN_POINTS",
    "MAX_POINTS",
    "MAX_STEPS",
]
