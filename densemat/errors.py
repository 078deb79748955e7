"""
Exceptions raised by densemat.

Both concrete errors derive from ``ValueError`` through ``MatrixError`` so
that callers may catch either the library base class or the builtin.
"""

from __future__ import annotations

from typing import Tuple


Shape = Tuple[int, int]


class MatrixError(ValueError):
    """Base class for all matrix errors."""


class ShapeError(MatrixError):
    """
    A constructor was given an invalid shape.

    Raised when a requested dimension is not positive, or when the supplied
    data does not have the requested number of rows or columns.
    """


class DimensionMismatchError(MatrixError):
    """
    Two operands have incompatible shapes for an operation.

    Attributes
    ----------
    left, right:
        Shapes ``(rows, cols)`` of the two operands.
    """

    def __init__(self, message: str, left: Shape, right: Shape) -> None:
        super().__init__(f"{message}: {left[0]}x{left[1]} and {right[0]}x{right[1]}")
        self.left = left
        self.right = right
