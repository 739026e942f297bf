"""Hypercube corner enumeration for multilinear blending."""

from __future__ import annotations

from typing import Iterator, Sequence

import numpy as np


def iter_corners(dimension: int) -> Iterator[tuple[int, ...]]:
    """Yield the ``2**dimension`` corner bit-vectors in binary counter order.

    Axis 0 is the least significant bit, so the sequence starts at the
    all-low corner and ends at the all-high corner.
    """
    for counter in range(1 << dimension):
        yield tuple((counter >> k) & 1 for k in range(dimension))


def corner_term(
    corner: Sequence[int],
    left_index: np.ndarray,
    alpha: np.ndarray,
    strides: np.ndarray,
) -> tuple[float, int]:
    """Return ``(coefficient, flat point index)`` of one cell corner."""
    coefficient = 1.0
    flat = 0
    for k, bit in enumerate(corner):
        a = float(alpha[k])
        coefficient *= a if bit else 1.0 - a
        flat += (int(left_index[k]) + bit) * int(strides[k])
    return coefficient, flat
