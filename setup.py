from __future__ import annotations

import sys

from setuptools import Extension, setup


def _build_extensions():
    import numpy as np

    try:
        from Cython.Build import cythonize
    except Exception as exc:
        raise RuntimeError("Cython is required for building extensions. Install with: pip install cython") from exc

    ext_modules = [
        Extension("gridinterp._cyinterp", ["src/gridinterp/_cyinterp.pyx"], include_dirs=[np.get_include()]),
    ]
    return cythonize(ext_modules, compiler_directives={"language_level": "3"})


# The numpy corner kernel needs no compilation, so a plain install builds nothing.
# `python setup.py build_ext --inplace` compiles gridinterp._cyinterp for backend="cython".
if "build_ext" in sys.argv:
    setup(ext_modules=_build_extensions())
else:
    setup()
