"""Typed errors raised by grid construction and queries."""

from __future__ import annotations


class GridInterpError(ValueError):
    """Base class for shape/argument failures carrying expected vs. actual values."""

    def __init__(self, message: str, *, expected: object = None, actual: object = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ShapeMismatchError(GridInterpError):
    """The value table or grid layout is inconsistent."""


class InvalidArgumentError(GridInterpError):
    """A query (or checked construction input) has the wrong dimensionality or ordering."""
