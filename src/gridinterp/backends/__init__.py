"""Corner-accumulation kernels selectable through :func:`build_backend`."""

from .base import CornerBackend
from .factory import build_backend

__all__ = ["CornerBackend", "build_backend"]
