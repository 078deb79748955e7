"""
Console formatting for matrices.

Every entry is rendered with Python's fixed-point format spec
(``f"{value:.{precision}f}"``). This rounds the exact binary value of the
float half-to-even, which gives the same digits as C's ``printf("%.*f")``.

Each column is right-aligned to the width of its widest entry, rows are
wrapped in square brackets and entries are separated by a single space:

    [ 0.1234 -0.5000]
    [-1.0000  0.2500]
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional, Sequence, TextIO

if TYPE_CHECKING:
    from densemat.matrix import Matrix

DEFAULT_PRECISION = 4
EMPTY_MATRIX_TEXT = "Empty matrix"


def _check_precision(precision: int) -> None:
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}.")


def column_widths(data: Sequence[Sequence[float]], precision: int) -> Optional[List[int]]:
    """
    Compute the display width of each column.

    Parameters
    ----------
    data:
        Row-major grid.
    precision:
        Number of decimal places.

    Returns
    -------
    list of int or None
        Width of the longest formatted entry of each column (sign, integer
        digits, decimal point and fractional digits), or None if ``data``
        has no rows or no columns.
    """
    _check_precision(precision)
    if len(data) == 0 or len(data[0]) == 0:
        return None

    widths = []
    for col in range(len(data[0])):
        widths.append(max(len(f"{row[col]:.{precision}f}") for row in data))
    return widths


def format_matrix(data: Sequence[Sequence[float]], precision: int = DEFAULT_PRECISION) -> str:
    """
    Render a grid as bracketed, column-aligned text.

    Returns ``EMPTY_MATRIX_TEXT`` for a degenerate grid. The result has one
    line per row and no trailing newline.
    """
    widths = column_widths(data, precision)
    if widths is None:
        return EMPTY_MATRIX_TEXT

    lines = []
    for row in data:
        cells = " ".join(f"{value:>{widths[j]}.{precision}f}" for j, value in enumerate(row))
        lines.append(f"[{cells}]")
    return "\n".join(lines)


def display(matrix: "Matrix", precision: int = DEFAULT_PRECISION, file: Optional[TextIO] = None) -> None:
    """
    Print ``matrix`` with ``precision`` decimals.

    Parameters
    ----------
    matrix:
        Matrix to print.
    precision:
        Number of decimal places, >= 0.
    file:
        Output stream. Defaults to the current ``sys.stdout``.
    """
    print(format_matrix(matrix.data, precision), file=file if file is not None else sys.stdout)
