"""Immutable rectilinear grid with stacked tick storage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .errors import InvalidArgumentError, ShapeMismatchError


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Grid:
    """Per-axis ticks stored back to back in ``stacked_ticks``.

    ``offset[k]`` is the position of axis ``k``'s first tick inside
    ``stacked_ticks``; for axes of 6 and 5 ticks ``offset == [0, 6, 11]``.
    ``strides[k]`` is the flat-table step of axis ``k`` with the first axis
    varying fastest.
    """

    offset: np.ndarray
    stacked_ticks: np.ndarray
    sizes: tuple[int, ...]
    strides: np.ndarray

    @classmethod
    def from_axes(cls, axes: Sequence[Sequence[float]], *, check_monotonic: bool = False) -> "Grid":
        if len(axes) == 0:
            raise ShapeMismatchError("grid must contain at least one axis", expected=">= 1", actual=0)
        ticks = [np.asarray(axis, dtype=np.float64).ravel() for axis in axes]
        for k, t in enumerate(ticks):
            if t.size < 2:
                raise ShapeMismatchError(
                    f"axis {k} must contain at least 2 ticks, got {t.size}",
                    expected=">= 2",
                    actual=int(t.size),
                )
            if check_monotonic and not np.all(np.diff(t) > 0.0):
                raise InvalidArgumentError(
                    f"axis {k} ticks must be strictly increasing",
                    expected="strictly increasing",
                    actual=t.tolist(),
                )

        sizes = tuple(int(t.size) for t in ticks)
        offset = np.zeros(len(sizes) + 1, dtype=np.int64)
        offset[1:] = np.cumsum(sizes)
        strides = np.ones(len(sizes), dtype=np.int64)
        strides[1:] = np.cumprod(sizes[:-1])
        return cls(
            offset=_readonly(offset),
            stacked_ticks=_readonly(np.concatenate(ticks)),
            sizes=sizes,
            strides=_readonly(strides),
        )

    @property
    def input_dimension(self) -> int:
        return len(self.sizes)

    @property
    def element_count(self) -> int:
        return int(np.prod(self.sizes, dtype=np.int64))

    def ticks(self, k: int) -> np.ndarray:
        return self.stacked_ticks[self.offset[k] : self.offset[k + 1]]

    @property
    def axes(self) -> tuple[np.ndarray, ...]:
        return tuple(self.ticks(k) for k in range(self.input_dimension))
