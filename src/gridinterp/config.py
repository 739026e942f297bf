"""Construction-time options for ``GridInterpolant``."""

from __future__ import annotations

from dataclasses import dataclass

BACKENDS = ("numpy", "numba", "jax", "cython", "auto")
SEARCH_MODES = ("linear", "binary")


@dataclass(frozen=True)
class InterpolantConfig:
    """Container for user-controlled interpolant options."""

    backend: str = "numpy"
    search: str = "linear"
    check_monotonic: bool = False

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ValueError("backend must be one of: numpy, numba, jax, cython, auto")
        if self.search not in SEARCH_MODES:
            raise ValueError("search must be one of: linear, binary")
        if not isinstance(self.check_monotonic, bool):
            raise ValueError("check_monotonic must be a bool")
