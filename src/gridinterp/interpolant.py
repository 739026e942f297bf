"""N-D multilinear interpolation on rectilinear grids."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .backends.factory import build_backend
from .config import InterpolantConfig
from .errors import InvalidArgumentError, ShapeMismatchError
from .grid import Grid
from .mesh import meshgrid
from .search import SEARCHERS


class GridInterpolant:
    """Piecewise-linear interpolant over a grid with non-uniform axis spacing.

    Comparable to MATLAB's ``griddedInterpolant`` or SciPy's
    ``RegularGridInterpolator`` with ``method="linear"``, except that queries
    outside the grid extrapolate linearly from the boundary cell.

    Parameters
    ----------
    axes : sequence of 1-D sequences
        Ticks of each input dimension, at least 2 per axis, increasing.
    values : sequence of float
        Sampled outputs for every tick combination, flattened with the first
        axis varying fastest (see :func:`gridinterp.mesh.meshgrid`). With
        several channels per grid point the channels of one point are
        contiguous.
    config : InterpolantConfig, optional
        Backend and bracket-search options.
    output_width : int or None
        Number of channels the caller expects per grid point. The default
        ``1`` rejects multi-channel tables; ``None`` accepts whatever width
        the table length implies.

    Examples
    --------
    >>> axes = [[0, 1, 2, 3, 4, 5], [6, 7, 8, 9, 10]]
    >>> x, y = GridInterpolant.meshgrid(axes)
    >>> interp = GridInterpolant(axes, -6 * x + 3 * y)
    >>> round(float(interp.eval([0.5, 9.9])[0]), 6)
    26.7
    """

    meshgrid = staticmethod(meshgrid)

    def __init__(
        self,
        axes: Sequence[Sequence[float]],
        values: Sequence[float],
        *,
        config: InterpolantConfig | None = None,
        output_width: int | None = 1,
    ) -> None:
        if output_width is not None and output_width < 1:
            raise ValueError("output_width must be >= 1 or None")
        self.config = config if config is not None else InterpolantConfig()
        grid = Grid.from_axes(axes, check_monotonic=self.config.check_monotonic)

        table = np.array(values, dtype=np.float64).ravel()
        element_count = grid.element_count
        if table.size % element_count != 0:
            raise ShapeMismatchError(
                f"value table of length {table.size} is not a multiple of the "
                f"{element_count} grid points",
                expected=f"multiple of {element_count}",
                actual=int(table.size),
            )

        resolved_width = table.size // element_count
        expected_width = resolved_width if output_width is None else output_width
        if resolved_width < 1 or resolved_width != expected_width:
            raise ShapeMismatchError(
                f"value table holds {resolved_width} output(s) per grid point, "
                f"expected {expected_width}",
                expected=expected_width,
                actual=resolved_width,
            )

        if grid.input_dimension != len(grid.offset) - 1:
            raise ShapeMismatchError(
                "input dimension is not consistent with the provided grid",
                expected=grid.input_dimension,
                actual=len(grid.offset) - 1,
            )

        table.setflags(write=False)
        self._grid = grid
        self._values = table
        self._output_width = int(resolved_width)
        self._low_index = SEARCHERS[self.config.search]
        self._backend = build_backend(self.config.backend)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sizes={self._grid.sizes}, "
            f"output_width={self._output_width}, backend={self.backend_name!r})"
        )

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def input_dimension(self) -> int:
        return self._grid.input_dimension

    @property
    def output_width(self) -> int:
        return self._output_width

    @property
    def element_count(self) -> int:
        return self._grid.element_count

    @property
    def offset(self) -> np.ndarray:
        return self._grid.offset

    @property
    def stacked_ticks(self) -> np.ndarray:
        return self._grid.stacked_ticks

    @property
    def backend_name(self) -> str:
        return self._backend.name

    def _as_point(self, point: Sequence[float]) -> np.ndarray:
        x = np.asarray(point, dtype=np.float64).ravel()
        if x.size != self.input_dimension:
            raise InvalidArgumentError(
                f"point has {x.size} coordinate(s), grid has {self.input_dimension} axes",
                expected=self.input_dimension,
                actual=int(x.size),
            )
        return x

    def calculate_weights(self, point: Sequence[float]) -> tuple[np.ndarray, np.ndarray]:
        """Return the left bracket index and normalized offset on every axis.

        ``alpha`` is not clamped, so it leaves ``[0, 1]`` for points outside
        the grid.
        """
        x = self._as_point(point)
        d = self.input_dimension
        left_index = np.empty(d, dtype=np.int64)
        alpha = np.empty(d, dtype=np.float64)
        for k in range(d):
            ticks = self._grid.ticks(k)
            xi = float(x[k])
            j = self._low_index(ticks, xi)
            left_index[k] = j
            alpha[k] = (xi - ticks[j]) / (ticks[j + 1] - ticks[j])
        return left_index, alpha

    def eval(self, point: Sequence[float]) -> np.ndarray:
        """Interpolate (or extrapolate) the table at ``point``.

        Returns a new array of ``output_width`` values.
        """
        left_index, alpha = self.calculate_weights(point)
        return self._backend.accumulate(
            left_index,
            alpha,
            self._grid.strides,
            self._values,
            self._output_width,
        )

    __call__ = eval
