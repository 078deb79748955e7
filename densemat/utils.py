"""
utils
==============

Small utilities shared by the library and the example script:

- logging configuration for scripts
- the process-wide random generator used by ``Matrix.random``
"""

from __future__ import annotations

import logging
import threading
from typing import Optional, Tuple

import numpy as np


logger = logging.getLogger(__name__)

_rng: Optional[np.random.Generator] = None
_rng_lock = threading.Lock()


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configure basic logging for scripts.

    Parameters
    ----------
    level:
        Logging level (e.g., logging.INFO).
    """
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def seed(value: Optional[int] = None) -> None:
    """
    Replace the shared generator with a freshly seeded one.

    Parameters
    ----------
    value:
        Seed passed to ``numpy.random.default_rng``. ``None`` draws fresh
        entropy from the operating system.
    """
    global _rng
    with _rng_lock:
        _rng = np.random.default_rng(value)
    logger.debug("Shared generator reseeded (seed=%s)", value)


def _shared_rng() -> np.random.Generator:
    # Caller holds _rng_lock.
    global _rng
    if _rng is None:
        _rng = np.random.default_rng()
        logger.debug("Shared generator created from OS entropy")
    return _rng


def uniform(
    low: float,
    high: float,
    size: Tuple[int, int],
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Draw a ``size``-shaped array of samples from ``[low, high)``.

    Parameters
    ----------
    low, high:
        Interval bounds. Samples are ``low + (high - low) * u`` with ``u``
        uniform in ``[0, 1)``. The bounds are not checked against each
        other: with ``low > high`` samples land in ``(high, low]``.
    size:
        Output shape.
    rng:
        Generator to draw from. If None, the shared generator is used and
        the draw is serialized with a lock.

    Returns
    -------
    np.ndarray
        float64 array of shape ``size``.
    """
    if rng is not None:
        unit = rng.random(size)
    else:
        with _rng_lock:
            unit = _shared_rng().random(size)
    return low + (high - low) * unit
