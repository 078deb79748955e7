"""
Dense real matrices.

This module implements :class:`Matrix`, a small value type wrapping a
rectangular grid of Python floats.

---------------------------------------------------------------------
Construction
---------------------------------------------------------------------
Matrices are built through the factory classmethods:

    Matrix.from_data(rows, cols, data)
    Matrix.zeros(rows, cols)
    Matrix.identity(size)
    Matrix.random(rows, cols, low, high)
    Matrix.from_numpy(array)

Factories validate the requested shape and raise :class:`ShapeError` on
failure. The bare constructor ``Matrix()`` yields the empty 0x0 matrix and
performs no validation.

---------------------------------------------------------------------
Operations
---------------------------------------------------------------------
``add``, ``multiply``, ``transpose`` and ``map`` never mutate the receiver;
they always return a new Matrix. Multiplication is the naive triple loop
with the inner sum taken in ascending ``k``:

    result[i][j] = Σ_k a[i][k] * b[k][j]

so results are reproducible bit for bit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, TextIO, Tuple

import numpy as np

from densemat.errors import DimensionMismatchError, ShapeError
from densemat.formatting import DEFAULT_PRECISION, display, format_matrix
from densemat.utils import uniform

logger = logging.getLogger(__name__)

# =============================================================================
# Types
# =============================================================================

Grid = List[List[float]]


# =============================================================================
# Helper functions
# =============================================================================

def _zero_grid(rows: int, cols: int) -> Grid:
    return [[0.0] * cols for _ in range(rows)]


def _check_dimensions(rows: int, cols: int) -> None:
    if rows <= 0 or cols <= 0:
        raise ShapeError(f"dimensions must be positive integers, got {rows}x{cols}.")


# =============================================================================
# Public API
# =============================================================================

@dataclass(frozen=True)
class Matrix:
    """
    Dense matrix of floats.

    Attributes
    ----------
    rows : int
        Number of rows.
    cols : int
        Number of columns.
    data : list of list of float
        Row-major grid, ``rows`` lists of ``cols`` floats each.

    Notes
    -----
    Instances are values: no method modifies ``data`` in place, and the
    factories copy the caller's grid so that each Matrix owns its rows.
    Matrices compare by value but are unhashable.
    """
    __hash__ = None  # type: ignore[assignment]

    rows: int = 0
    cols: int = 0
    data: Grid = field(default_factory=list)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def _trusted(cls, rows: int, cols: int, data: Grid) -> "Matrix":
        # Shape is guaranteed by the caller.
        return cls(rows=rows, cols=cols, data=data)

    @classmethod
    def from_data(cls, rows: int, cols: int, data: Sequence[Sequence[float]]) -> "Matrix":
        """
        Build a matrix from explicit values.

        Parameters
        ----------
        rows, cols : int
            Requested shape. Both must be positive.
        data : sequence of sequences of float
            ``rows`` rows of ``cols`` values each.

        Returns
        -------
        Matrix
            A matrix holding a float copy of ``data``.

        Raises
        ------
        ShapeError
            If a dimension is not positive, or if ``data`` does not have
            ``rows`` rows of exactly ``cols`` values.
        """
        _check_dimensions(rows, cols)
        if len(data) != rows:
            raise ShapeError(f"invalid data dimension: expected {rows} rows, got {len(data)}.")
        grid: Grid = []
        for i, row in enumerate(data):
            if len(row) != cols:
                raise ShapeError(
                    f"invalid data dimension: row {i} has {len(row)} columns, expected {cols}."
                )
            grid.append([float(value) for value in row])
        return cls._trusted(rows, cols, grid)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        """Return a ``rows x cols`` matrix filled with 0.0."""
        _check_dimensions(rows, cols)
        return cls._trusted(rows, cols, _zero_grid(rows, cols))

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        """
        Return the ``size x size`` identity matrix.

        Raises
        ------
        ShapeError
            If ``size`` is not positive.
        """
        if size <= 0:
            raise ShapeError(f"expected an identity matrix size greater than 0, got {size}.")
        grid = _zero_grid(size, size)
        for i in range(size):
            grid[i][i] = 1.0
        return cls._trusted(size, size, grid)

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        low: float,
        high: float,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> "Matrix":
        """
        Return a matrix of independent uniform samples from ``[low, high)``.

        Parameters
        ----------
        rows, cols : int
            Requested shape. Both must be positive.
        low, high : float
            Sampling interval, as ``low + (high - low) * u`` with ``u`` in
            ``[0, 1)``. Not checked against each other: with ``low > high``
            the samples fall in ``(high, low]``.
        rng : numpy.random.Generator, optional
            Generator to draw from. Defaults to the shared, lock-guarded
            generator of :mod:`densemat.utils`.

        Raises
        ------
        ShapeError
            If a dimension is not positive.
        """
        _check_dimensions(rows, cols)
        samples = uniform(low, high, (rows, cols), rng=rng)
        logger.debug("Generated %dx%d random matrix in [%s, %s)", rows, cols, low, high)
        return cls._trusted(rows, cols, samples.tolist())

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "Matrix":
        """
        Build a matrix from a 2-D array-like.

        Raises
        ------
        ShapeError
            If ``array`` is not 2-D or has an empty dimension.
        """
        arr = np.asarray(array, dtype=np.float64)
        if arr.ndim != 2:
            raise ShapeError(f"expected a 2-D array, got shape {arr.shape}.")
        rows, cols = arr.shape
        return cls.from_data(rows, cols, arr.tolist())

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def __getitem__(self, index: Tuple[int, int]) -> float:
        i, j = index
        return self.data[i][j]

    def to_numpy(self) -> np.ndarray:
        """Return a float64 copy of the grid as a ``(rows, cols)`` array."""
        return np.array(self.data, dtype=np.float64).reshape(self.rows, self.cols)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: "Matrix") -> "Matrix":
        """
        Elementwise sum.

        Raises
        ------
        DimensionMismatchError
            If the two shapes differ.
        """
        if self.shape != other.shape:
            raise DimensionMismatchError(
                "matrices must have matching dimensions", self.shape, other.shape
            )
        grid = [
            [x + y for x, y in zip(row, other_row)]
            for row, other_row in zip(self.data, other.data)
        ]
        return Matrix._trusted(self.rows, self.cols, grid)

    def multiply(self, other: "Matrix") -> "Matrix":
        """
        Matrix product ``self @ other``.

        The result is accumulated from zero with ``k`` ascending for every
        entry; no identity or sparsity shortcuts are taken.

        Raises
        ------
        DimensionMismatchError
            If ``self.cols != other.rows``.
        """
        if self.cols != other.rows:
            raise DimensionMismatchError(
                "incompatible dimensions for matrix multiplication", self.shape, other.shape
            )
        result = _zero_grid(self.rows, other.cols)
        for i in range(self.rows):
            row = self.data[i]
            out = result[i]
            for j in range(other.cols):
                for k in range(self.cols):
                    out[j] += row[k] * other.data[k][j]
        return Matrix._trusted(self.rows, other.cols, result)

    def transpose(self) -> "Matrix":
        """Return the ``cols x rows`` transpose."""
        result = _zero_grid(self.cols, self.rows)
        for j in range(self.rows):
            for i in range(self.cols):
                result[i][j] = self.data[j][i]
        return Matrix._trusted(self.cols, self.rows, result)

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    def map(self, f: Callable[[float], float]) -> "Matrix":
        """
        Apply ``f`` to every entry, in row-major order.

        Exceptions raised by ``f`` propagate to the caller; no matrix is
        returned in that case.
        """
        grid = [[float(f(value)) for value in row] for row in self.data]
        return Matrix._trusted(self.rows, self.cols, grid)

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __matmul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def format(self, precision: int = DEFAULT_PRECISION) -> str:
        """Return the display text, see :func:`densemat.formatting.format_matrix`."""
        return format_matrix(self.data, precision)

    def display(self, precision: int = DEFAULT_PRECISION, file: Optional[TextIO] = None) -> None:
        """Print the matrix with ``precision`` decimals."""
        display(self, precision, file=file)

    def __str__(self) -> str:
        return self.format()
