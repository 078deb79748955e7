"""
densemat demo: random matrix
============================

Build a random matrix with entries drawn uniformly from ``[low, high)`` and
print it, one bracketed row per line, with columns right-aligned.

Defaults: a 10x10 matrix in ``[-1, 1)`` printed with 4 decimals.

Run
---
    python random_matrix.py
    python random_matrix.py --rows 3 --cols 5 --low 0 --high 100 --precision 2 --seed 42
"""

from __future__ import annotations

import argparse
import logging
import sys

from densemat import Matrix, MatrixError
from densemat.formatting import DEFAULT_PRECISION
from densemat.utils import seed, setup_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Print a uniformly random matrix")
    parser.add_argument("--rows", type=int, default=10, help="Number of rows")
    parser.add_argument("--cols", type=int, default=10, help="Number of columns")
    parser.add_argument("--low", type=float, default=-1.0, help="Lower bound (inclusive)")
    parser.add_argument("--high", type=float, default=1.0, help="Upper bound (exclusive)")
    parser.add_argument("--precision", type=int, default=DEFAULT_PRECISION, help="Decimal places")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    args = parser.parse_args()

    setup_logging()

    if args.seed is not None:
        seed(args.seed)
        logging.info("Using seed: %d", args.seed)

    try:
        matrix = Matrix.random(args.rows, args.cols, args.low, args.high)
    except MatrixError as exc:
        logging.error("Cannot build matrix: %s", exc)
        sys.exit(1)

    if args.precision < 0:
        logging.error("Precision must be >= 0, got %d", args.precision)
        sys.exit(1)

    matrix.display(args.precision)


if __name__ == "__main__":
    main()
