"""
densemat: dense real matrices in pure Python

A small library for building, combining and printing dense matrices of
floats: explicit, zero, identity and uniform-random construction,
elementwise addition, matrix multiplication, transpose, elementwise maps
and column-aligned console display.
"""

from densemat.errors import DimensionMismatchError, MatrixError, ShapeError
from densemat.formatting import DEFAULT_PRECISION, column_widths, display, format_matrix
from densemat.matrix import Matrix

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PRECISION",
    "DimensionMismatchError",
    "Matrix",
    "MatrixError",
    "ShapeError",
    "column_widths",
    "display",
    "format_matrix",
]
