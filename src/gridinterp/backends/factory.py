"""Backend factory for corner-accumulation kernels."""

from __future__ import annotations

import logging

from .cython_backend import build_cython_backend
from .jax_backend import build_jax_backend
from .numba_backend import build_numba_backend
from .numpy_backend import build_numpy_backend

logger = logging.getLogger(__name__)


def build_backend(name: str):
    if name == "numpy":
        return build_numpy_backend()
    if name == "cython":
        return build_cython_backend()
    if name == "numba":
        return build_numba_backend()
    if name == "jax":
        return build_jax_backend()
    if name == "auto":
        for builder in (build_cython_backend, build_numba_backend, build_jax_backend):
            try:
                return builder()
            except RuntimeError as exc:
                logger.debug("skipping backend: %s", exc)
        return build_numpy_backend()
    raise ValueError(f"Unknown backend: {name}")
