# tests/conftest.py

import numpy as np
import pytest


def pytest_addoption(parser):
    """Add a custom CLI flag to run large-input stress tests."""
    parser.addoption(
        "--stress",
        action="store_true",
        default=False,
        help="Run stress tests on large polylines",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "stress: slow tests on large polylines")


def pytest_collection_modifyitems(config, items):
    """Skip tests marked 'stress' unless the --stress flag is passed."""
    if config.getoption("--stress"):
        # If flag is present, run everything
        return

    skip_stress = pytest.mark.skip(reason="need --stress option to run")
    for item in items:
        if "stress" in item.keywords:
            item.add_marker(skip_stress)


##########
# HELPERS
##########


def point_indices(original, simplified, dimension):
    """
    Returns the indices of the original points retained in ``simplified``.

    Matches greedily in order; fails if ``simplified`` is not a subsequence.
    """
    orig = np.asarray(original).reshape(-1, dimension)
    simp = np.asarray(simplified).reshape(-1, dimension)
    indices = []
    i = 0
    for point in simp:
        while i < len(orig) and not np.array_equal(orig[i], point):
            i += 1
        assert i < len(orig), f"{point} is not a point of the original polyline"
        indices.append(i)
        i += 1
    return indices


##########
# FIXTURES
##########


@pytest.fixture
def straight_line():
    """
    Factory fixture for a straight polyline: point ``i`` is ``(i, 0, ...)``.

    Consecutive points are exactly 1 apart.
    """

    def _make(count: int, dimension: int = 2, dtype=float):
        points = np.zeros((count, dimension), dtype=dtype)
        points[:, 0] = np.arange(count)
        return points.reshape(-1)

    return _make


@pytest.fixture
def sawtooth():
    """
    Factory fixture for a sawtooth polyline with a step of 10.

    Point ``i`` is at ``x = 10 * i``; odd points rise to ``y = (i + 1) / 2``,
    even points lie on ``y = 0``. Further coordinates are 0.
    """

    def _make(count: int = 11, dimension: int = 2, dtype=float):
        points = np.zeros((count, dimension), dtype=dtype)
        for i in range(count):
            points[i, 0] = 10 * i
            if i % 2:
                points[i, 1] = (i + 1) // 2
        return points.reshape(-1)

    return _make


@pytest.fixture
def spike():
    """A 9-point straight line along x whose middle point is lifted to y = 2."""
    points = np.zeros((9, 2))
    points[:, 0] = np.arange(9)
    points[4, 1] = 2
    return points.reshape(-1)


@pytest.fixture
def parabola():
    """Factory fixture for points ``(i, i**2)``."""

    def _make(count: int = 11):
        x = np.arange(count, dtype=float)
        return np.column_stack([x, x * x]).reshape(-1)

    return _make


@pytest.fixture
def indices_of():
    """Returns :func:`point_indices` for use inside tests."""
    return point_indices
