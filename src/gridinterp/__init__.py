"""Multilinear interpolation on N-D rectilinear grids."""

from .backends import build_backend
from .config import InterpolantConfig
from .corners import iter_corners
from .errors import GridInterpError, InvalidArgumentError, ShapeMismatchError
from .grid import Grid
from .interpolant import GridInterpolant
from .mesh import meshgrid
from .validation import validate_affine

__all__ = [
    "build_backend",
    "InterpolantConfig",
    "iter_corners",
    "GridInterpError",
    "InvalidArgumentError",
    "ShapeMismatchError",
    "Grid",
    "GridInterpolant",
    "meshgrid",
    "validate_affine",
]
