"""Randomized check that affine tables are reproduced exactly inside the grid."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict, dataclass

import numpy as np

from .config import BACKENDS, SEARCH_MODES, InterpolantConfig
from .interpolant import GridInterpolant
from .mesh import meshgrid

logger = logging.getLogger(__name__)

W_TICKS = (-4.0, -3.0, -2.0, -1.0, 0.0)
X_TICKS = (0.0, 1.0, 2.0, 3.0, 4.0, 5.0)
Y_TICKS = (6.0, 7.0, 8.0, 9.0, 10.0)
Z_TICKS = (11.0, 12.0, 13.0, 14.0, 15.0)

# (axes, slopes) of the affine test surfaces, keyed by input dimension.
AFFINE_CASES = {
    1: ((X_TICKS,), (-6.0,)),
    2: ((X_TICKS, Y_TICKS), (-6.0, 3.0)),
    3: ((X_TICKS, Y_TICKS, Z_TICKS), (-6.0, 3.0, -16.33)),
    4: ((W_TICKS, X_TICKS, Y_TICKS, Z_TICKS), (1.55, -6.0, 3.0, -16.33)),
}


@dataclass
class AffineValidationResult:
    dims: int
    n_points: int
    backend: str
    search: str
    max_abs_error: float
    mean_abs_error: float
    tol: float
    passed: bool


def affine_table(axes, slopes) -> np.ndarray:
    mesh = meshgrid(axes)
    return sum(s * m for s, m in zip(slopes, mesh))


def validate_affine(
    *,
    dims: int = 2,
    n_points: int = 1000,
    seed: int | None = None,
    backend: str = "numpy",
    search: str = "linear",
    tol: float = 1.0e-12,
) -> AffineValidationResult:
    if dims not in AFFINE_CASES:
        raise ValueError("dims must be one of: 1, 2, 3, 4")
    if n_points < 1:
        raise ValueError("n_points must be >= 1")

    axes, slopes = AFFINE_CASES[dims]
    interp = GridInterpolant(
        axes,
        affine_table(axes, slopes),
        config=InterpolantConfig(backend=backend, search=search),
    )

    rng = np.random.default_rng(seed)
    lo = np.array([a[0] for a in axes])
    hi = np.array([a[-1] for a in axes])
    points = rng.uniform(lo, hi, size=(n_points, dims))
    expected = points @ np.asarray(slopes)

    errors = np.empty(n_points, dtype=float)
    for i, p in enumerate(points):
        errors[i] = abs(float(interp.eval(p)[0]) - float(expected[i]))
    # Relative to the surface magnitude so 4-D tables (|f| ~ 250) share the tolerance.
    scale = np.maximum(1.0, np.abs(expected))
    passed = bool(np.all(errors <= tol * scale))
    logger.info("affine check dims=%d backend=%s max_abs_error=%.3e", dims, interp.backend_name, errors.max())

    return AffineValidationResult(
        dims=dims,
        n_points=n_points,
        backend=interp.backend_name,
        search=search,
        max_abs_error=float(np.max(errors)),
        mean_abs_error=float(np.mean(errors)),
        tol=tol,
        passed=passed,
    )


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Check that affine grid tables are interpolated exactly.")
    ap.add_argument("--dims", type=int, default=2, choices=sorted(AFFINE_CASES))
    ap.add_argument("--points", type=int, default=1000)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--backend", default="numpy", choices=BACKENDS)
    ap.add_argument("--search", default="linear", choices=SEARCH_MODES)
    ap.add_argument("--tol", type=float, default=1.0e-12)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    res = validate_affine(
        dims=args.dims,
        n_points=args.points,
        seed=args.seed,
        backend=args.backend,
        search=args.search,
        tol=args.tol,
    )
    print(json.dumps(asdict(res), indent=2, sort_keys=True))
    return 0 if res.passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
