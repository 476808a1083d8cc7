# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# State class for vibrating string simulations

import numpy as np


class State:
    """
    Holds the results buffer of a vibrating string run.

    The buffer has one slot per point index plus padding at both ends,
    so index ``idx`` in ``[1, tpoints]`` maps directly to ``values[idx]``.

    Attributes:
        values: Displacements (float), shape [tpoints + 2]
        tpoints: Number of points along the string
    """

    def __init__(self):
        self.values = None    # Displacements (float), padded
        self.tpoints = 0      # Number of points

    def displacements(self) -> np.ndarray:
        """
        Copy the displacements of points ``1..tpoints`` to the host.

        Returns:
            np.ndarray: shape [tpoints], position i holds point i + 1
        """
        if self.values is None:
            return np.zeros(0, dtype=np.float32)

        # Transfer from device to host
        values_np = self.values.numpy()
        return np.array(values_np[1:self.tpoints + 1], copy=True)
