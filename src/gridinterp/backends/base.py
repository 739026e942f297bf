"""Backend protocol for corner-accumulation kernels."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class CornerBackend(Protocol):
    name: str

    def accumulate(
        self,
        left_index: np.ndarray,
        alpha: np.ndarray,
        strides: np.ndarray,
        values: np.ndarray,
        output_width: int,
    ) -> np.ndarray:
        ...
