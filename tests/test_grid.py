from __future__ import annotations

import unittest

import numpy as np

from gridinterp.errors import InvalidArgumentError, ShapeMismatchError
from gridinterp.grid import Grid
from gridinterp.search import low_index_binary, low_index_linear


class TestGrid(unittest.TestCase):
    def test_layout_state(self) -> None:
        grid = Grid.from_axes([[0, 1, 2, 3, 4, 5], [6, 7, 8, 9, 10]])

        np.testing.assert_array_equal(grid.offset, [0, 6, 11])
        np.testing.assert_array_equal(grid.stacked_ticks, np.arange(11.0))
        np.testing.assert_array_equal(grid.strides, [1, 6])
        self.assertEqual(grid.sizes, (6, 5))
        self.assertEqual(grid.input_dimension, 2)
        self.assertEqual(grid.element_count, 30)
        np.testing.assert_array_equal(grid.ticks(1), [6, 7, 8, 9, 10])

    def test_strides_for_four_axes(self) -> None:
        grid = Grid.from_axes([[0, 1], [0, 1, 2], [0, 1, 2, 3], [0, 1]])
        np.testing.assert_array_equal(grid.strides, [1, 2, 6, 24])
        self.assertEqual(grid.element_count, 48)

    def test_arrays_are_read_only(self) -> None:
        grid = Grid.from_axes([[0.0, 1.0]])
        with self.assertRaises(ValueError):
            grid.stacked_ticks[0] = 5.0
        with self.assertRaises(ValueError):
            grid.offset[0] = 1

    def test_rejects_short_axis(self) -> None:
        with self.assertRaises(ShapeMismatchError) as ctx:
            Grid.from_axes([[0.0, 1.0], [2.0]])
        self.assertEqual(ctx.exception.actual, 1)

    def test_rejects_empty_grid(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            Grid.from_axes([])

    def test_identity_equality_and_hashable(self) -> None:
        a = Grid.from_axes([[0.0, 1.0]])
        b = Grid.from_axes([[0.0, 1.0]])
        self.assertEqual(a, a)
        self.assertNotEqual(a, b)
        self.assertEqual(len({a, b}), 2)

    def test_monotonic_check_is_opt_in(self) -> None:
        Grid.from_axes([[0.0, 2.0, 1.0]])
        with self.assertRaises(InvalidArgumentError):
            Grid.from_axes([[0.0, 2.0, 1.0]], check_monotonic=True)
        with self.assertRaises(InvalidArgumentError):
            Grid.from_axes([[0.0, 1.0, 1.0]], check_monotonic=True)


class TestBracketSearch(unittest.TestCase):
    ticks = np.array([0.0, 1.0, 2.5, 4.0, 10.0])

    def test_linear_search(self) -> None:
        cases = [
            (-3.0, 0),
            (0.0, 0),
            (0.99, 0),
            (1.0, 1),
            (2.5, 2),
            (9.0, 3),
            (10.0, 3),
            (42.0, 3),
        ]
        for xi, expected in cases:
            self.assertEqual(low_index_linear(self.ticks, xi), expected, msg=f"xi={xi}")

    def test_two_tick_axis_always_uses_interval_zero(self) -> None:
        ticks = np.array([1.0, 2.0])
        for xi in (-5.0, 1.0, 1.5, 2.0, 7.0):
            self.assertEqual(low_index_linear(ticks, xi), 0)
            self.assertEqual(low_index_binary(ticks, xi), 0)

    def test_binary_matches_linear(self) -> None:
        rng = np.random.default_rng(7)
        samples = np.concatenate([rng.uniform(-5.0, 15.0, 500), self.ticks, [np.nan]])
        for xi in samples:
            self.assertEqual(low_index_binary(self.ticks, xi), low_index_linear(self.ticks, xi))


if __name__ == "__main__":
    unittest.main()
