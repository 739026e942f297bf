"""Bracket search along a single axis."""

from __future__ import annotations

import numpy as np


def low_index_linear(ticks: np.ndarray, xi: float) -> int:
    """Return the first ``j`` with ``xi < ticks[j + 1]``, or the last interval.

    Points below the first tick land in interval 0 and points at or above the
    last interior tick land in interval ``n - 2``, so callers extrapolate from
    the boundary cell.
    """
    n = len(ticks)
    j = 0
    while j < n - 2:
        if xi < ticks[j + 1]:
            break
        j += 1
    return j


def low_index_binary(ticks: np.ndarray, xi: float) -> int:
    """Same result as :func:`low_index_linear` in ``O(log n)`` for increasing ticks."""
    j = int(np.searchsorted(ticks, xi, side="right")) - 1
    return min(max(j, 0), len(ticks) - 2)


SEARCHERS = {
    "linear": low_index_linear,
    "binary": low_index_binary,
}
