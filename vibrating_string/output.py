# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
"""
Printing and plotting of final string displacements.
"""

import sys

import numpy as np
import matplotlib.pyplot as plt


VALUES_PER_LINE = 10


def format_values(values, per_line: int = VALUES_PER_LINE) -> str:
    """
    Render displacements as '%6.4f' fields, per_line values per line.

    Args:
        values: Sequence of displacements (point 1 first)
        per_line: Number of values on each line

    Returns:
        str: The formatted text, newline-terminated unless empty
    """
    fields = [f"{float(v):6.4f}" for v in values]
    lines = [
        " ".join(fields[i:i + per_line])
        for i in range(0, len(fields), per_line)
    ]
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def print_values(values, file=None):
    """Write format_values(values) to file (stdout by default)."""
    if file is None:
        file = sys.stdout
    file.write(format_values(values))


def save_profile_plot(values, path: str, title: str = None):
    """
    Save a plot of displacement against normalized position.

    Args:
        values: Displacements of points 1..tpoints
        path: Output image path
        title: Optional plot title
    """
    values = np.asarray(values)
    tpoints = len(values)
    x = np.arange(tpoints) / max(tpoints - 1, 1)

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.plot(x, values, 'b-', linewidth=1.5, label='Displacement')
    ax.axhline(y=0, color='k', linestyle='--', alpha=0.3)
    ax.set_xlabel('Position x', fontsize=12)
    ax.set_ylabel('Displacement', fontsize=12)
    ax.set_title(title or f'Vibrating string ({tpoints} points)', fontsize=14, fontweight='bold')
    ax.legend(loc='upper right')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"✓ Plot saved as: {path}")
