"""Cython-accelerated corner accumulation backend."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

try:
    from .. import _cyinterp  # type: ignore
except Exception as exc:  # pragma: no cover - optional compiled extension
    _cyinterp = None
    _CYTHON_IMPORT_ERROR = exc
else:
    _CYTHON_IMPORT_ERROR = None


@dataclass(frozen=True)
class CythonCornerBackend:
    """Corner accumulation through the compiled ``_cyinterp`` extension."""

    name: str = "cython"

    def accumulate(
        self,
        left_index: np.ndarray,
        alpha: np.ndarray,
        strides: np.ndarray,
        values: np.ndarray,
        output_width: int,
    ) -> np.ndarray:
        return _cyinterp.accumulate(
            np.ascontiguousarray(left_index, dtype=np.int64),
            np.ascontiguousarray(alpha, dtype=np.float64),
            np.ascontiguousarray(strides, dtype=np.int64),
            np.ascontiguousarray(values, dtype=np.float64),
            int(output_width),
        )


def build_cython_backend() -> CythonCornerBackend:
    if _cyinterp is None:
        raise RuntimeError(
            "Cython backend unavailable (build with: python setup.py build_ext --inplace): "
            f"{_CYTHON_IMPORT_ERROR}"
        ) from _CYTHON_IMPORT_ERROR
    return CythonCornerBackend()
