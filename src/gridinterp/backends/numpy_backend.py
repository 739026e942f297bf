"""Default NumPy backend for corner accumulation."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..corners import corner_term, iter_corners


@dataclass(frozen=True)
class NumpyCornerBackend:
    """Reference kernel: walks every corner and adds its weighted table row."""

    name: str = "numpy"

    def accumulate(
        self,
        left_index: np.ndarray,
        alpha: np.ndarray,
        strides: np.ndarray,
        values: np.ndarray,
        output_width: int,
    ) -> np.ndarray:
        result = np.zeros(output_width, dtype=np.float64)
        for corner in iter_corners(len(left_index)):
            coefficient, flat = corner_term(corner, left_index, alpha, strides)
            base = flat * output_width
            result += coefficient * values[base : base + output_width]
        return result


def build_numpy_backend() -> NumpyCornerBackend:
    return NumpyCornerBackend()
