"""Full coordinate arrays for a rectilinear grid."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def meshgrid(axes: Sequence[Sequence[float]]) -> list[np.ndarray]:
    """Expand per-axis ticks into flat coordinate arrays (``ij`` indexing, first axis fastest).

    Parameters
    ----------
    axes : sequence of 1-D sequences
        Ticks of each input dimension, in axis order.

    Returns
    -------
    list of ndarray
        One array per axis, each of length ``prod(len(axis))``. Reading the
        arrays in lockstep enumerates every tick combination in the same
        flat order ``GridInterpolant`` expects for its value table, so
        ``values = f(*meshgrid(axes))`` is directly usable.
    """
    ticks = [np.asarray(axis, dtype=np.float64).ravel() for axis in axes]
    if not ticks:
        return []
    mesh = np.meshgrid(*ticks, indexing="ij")
    return [m.ravel(order="F") for m in mesh]
