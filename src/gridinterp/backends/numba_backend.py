"""Numba-accelerated corner accumulation backend."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

try:
    from numba import njit
except Exception as exc:  # pragma: no cover - optional dependency
    njit = None
    _NUMBA_IMPORT_ERROR = exc
else:
    _NUMBA_IMPORT_ERROR = None


if njit is not None:

    @njit(cache=True)
    def _accumulate_numba(
        left_index: np.ndarray,
        alpha: np.ndarray,
        strides: np.ndarray,
        values: np.ndarray,
        output_width: int,
    ) -> np.ndarray:
        d = left_index.shape[0]
        result = np.zeros(output_width, dtype=np.float64)
        for corner in range(1 << d):
            coefficient = 1.0
            flat = 0
            for k in range(d):
                bit = (corner >> k) & 1
                if bit == 1:
                    coefficient *= alpha[k]
                else:
                    coefficient *= 1.0 - alpha[k]
                flat += (left_index[k] + bit) * strides[k]
            base = flat * output_width
            for c in range(output_width):
                result[c] += coefficient * values[base + c]
        return result

    # Prime JIT cache once to avoid a latency spike on the first query.
    _accumulate_numba(
        np.zeros(1, dtype=np.int64),
        np.array([0.5], dtype=np.float64),
        np.ones(1, dtype=np.int64),
        np.array([0.0, 1.0], dtype=np.float64),
        1,
    )


@dataclass(frozen=True)
class NumbaCornerBackend:
    """Corner accumulation through a numba-jitted counter loop."""

    name: str = "numba"

    def accumulate(
        self,
        left_index: np.ndarray,
        alpha: np.ndarray,
        strides: np.ndarray,
        values: np.ndarray,
        output_width: int,
    ) -> np.ndarray:
        return _accumulate_numba(
            np.asarray(left_index, dtype=np.int64),
            np.asarray(alpha, dtype=np.float64),
            np.asarray(strides, dtype=np.int64),
            np.asarray(values, dtype=np.float64),
            int(output_width),
        )


def build_numba_backend() -> NumbaCornerBackend:
    if njit is None:
        raise RuntimeError(
            f"Numba backend unavailable: {_NUMBA_IMPORT_ERROR}"
        ) from _NUMBA_IMPORT_ERROR
    return NumbaCornerBackend()
