from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from densemat import Matrix, ShapeError
from densemat.utils import seed


def _entries(m):
    return [v for row in m.data for v in row]


def test_random_shape_and_range():
    """Scenario 4"""
    m = Matrix.random(3, 3, 0, 10)

    assert m.shape == (3, 3)
    assert all(len(row) == 3 for row in m.data)
    assert all(0.0 <= v < 10.0 for v in _entries(m))
    assert all(isinstance(v, float) for v in _entries(m))


def test_random_rejects_bad_dimensions():
    with pytest.raises(ShapeError):
        Matrix.random(0, 3, 0, 1)
    with pytest.raises(ShapeError):
        Matrix.random(3, -1, 0, 1)


def test_random_injected_generator():
    a = Matrix.random(4, 5, -1, 1, rng=np.random.default_rng(7))
    b = Matrix.random(4, 5, -1, 1, rng=np.random.default_rng(7))

    assert a == b
    assert all(-1.0 <= v < 1.0 for v in _entries(a))


def test_random_shared_seed():
    seed(123)
    a = Matrix.random(2, 3, 0, 1)
    seed(123)
    b = Matrix.random(2, 3, 0, 1)
    seed(None)

    assert a == b


def test_random_inverted_interval():
    """low > high is not validated; samples land between the bounds"""
    m = Matrix.random(4, 4, 10, 0, rng=np.random.default_rng(0))
    assert all(0.0 <= v <= 10.0 for v in _entries(m))


def test_random_inverted_interval_matches_scaled_draws():
    """Samples are low + (high - low) * u, also when low > high"""
    expected = 10.0 + (0.0 - 10.0) * np.random.default_rng(5).random((2, 3))
    m = Matrix.random(2, 3, 10, 0, rng=np.random.default_rng(5))

    assert m.data == expected.tolist()


def test_random_inverted_interval_shared_generator():
    m = Matrix.random(3, 3, 1, -1)
    assert all(-1.0 <= v <= 1.0 for v in _entries(m))


def test_random_concurrent_calls():
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: Matrix.random(5, 5, -1, 1), range(64)))

    for m in results:
        assert m.shape == (5, 5)
        assert all(-1.0 <= v < 1.0 for v in _entries(m))
