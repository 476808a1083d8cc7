# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Model class for vibrating string simulations

import numbers

import warp as wp

from .state import State


# Physical constants of the string
C = 1.0     # Wave speed
DT = 0.3    # Time step
DX = 1.0    # Point spacing

# Accepted run sizes
MIN_POINTS = 20
MAX_POINTS = 1_000_000
MAX_STEPS = 1_000_000


def check_count(name, value, low, high) -> int:
    """Return value as an int, raising ValueError unless it is an integer in [low, high]."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not low <= value <= high:
        raise ValueError(f"{name} must be in [{low}, {high}], got {value}")
    return int(value)


class Model:
    """
    Represents the static definition of a vibrating string.

    Stores the number of sample points, the physical constants that
    fix the per-point recurrence, and the device the results buffer
    lives on.

    Key Features:
        - Point count, validated against [MIN_POINTS, MAX_POINTS]
        - Courant coefficient tau = c * dt / dx and its square
        - Allocation of padded results buffers via state()
    """

    def __init__(self, tpoints: int, device=None, c: float = C, dt: float = DT, dx: float = DX):
        """
        Initialize a string Model.

        Args:
            tpoints (int): Number of points along the string
            device: Warp device ('cpu', 'cuda', 'cuda:0', ...). None picks Warp's preferred device.
            c (float): Wave speed
            dt (float): Time step
            dx (float): Point spacing
        """
        self.tpoints = check_count("tpoints", tpoints, MIN_POINTS, MAX_POINTS)
        self.device = wp.get_device(device)

        self.c = c
        self.dt = dt
        self.dx = dx

    @property
    def tau(self) -> float:
        """Courant coefficient c * dt / dx."""
        return self.c * self.dt / self.dx

    @property
    def sqtau(self) -> float:
        return self.tau * self.tau

    def state(self) -> State:
        """
        Create and return a new State object for this model.

        The results buffer holds tpoints + 2 zeros: slot 0 and slot
        tpoints + 1 are padding and are never written.

        Returns:
            State: The state object
        """
        s = State()
        s.tpoints = self.tpoints
        s.values = wp.zeros(self.tpoints + 2, dtype=wp.float32, device=self.device)

        return s
