# src/polysimpl/utils/coordinates.py
"""
Conversion helpers that turn caller-supplied coordinate data into flat numpy
arrays, and decide which numeric type distance calculations run in.
"""
from typing import Any, Optional

import numpy as np

CONVERSION_ERRORS = (ValueError, TypeError, OverflowError)


def as_numeric_array(coords: Any) -> np.ndarray:
    """
    Returns ``coords`` as a numpy array of integral or floating point values,
    keeping its shape.

    Accepts numpy arrays, lists/tuples and any other iterable. Forward-only
    iterables (generators, iterators) are consumed exactly once.

    Raises:
        TypeError: If the data is not numeric.
    """
    # 1. Arrays (Passthrough)
    if isinstance(coords, np.ndarray):
        arr = coords

    # 2. Sized sequences
    elif isinstance(coords, (list, tuple)):
        arr = _to_array(coords)

    # 3. Anything iterable (deque, range, generators)
    elif hasattr(coords, "__iter__"):
        arr = _to_array(list(coords))

    else:
        raise TypeError(f"Coordinates must be a sequence of numbers, got {type(coords)}")

    if not is_numeric_dtype(arr.dtype):
        raise TypeError(f"Coordinates must be integral or floating point, got {arr.dtype}")

    return arr


def as_coordinate_array(coords: Any) -> np.ndarray:
    """Returns ``coords`` as a flat 1-D numeric array (see :func:`as_numeric_array`)."""
    return as_numeric_array(coords).reshape(-1)


def _to_array(values) -> np.ndarray:
    try:
        return np.asarray(values)
    except CONVERSION_ERRORS as e:
        # ragged nesting and the like
        raise TypeError(f"Could not convert coordinates: {e}") from e


def is_numeric_dtype(dtype: np.dtype) -> bool:
    """True for the integral and floating point types a polyline may use."""
    return bool(
        np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)
    )


def calculation_dtype(dtype: np.dtype) -> np.dtype:
    """
    Returns the type used for division-bearing calculations.

    Integral coordinate types are promoted to ``float64``; floating point types
    are used as they are.
    """
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.floating):
        return dtype
    return np.dtype(np.float64)


def as_calculation_array(values: Any) -> np.ndarray:
    """Returns ``values`` as an array of its calculation type (no copy if possible)."""
    arr = np.asarray(values)
    return arr.astype(calculation_dtype(arr.dtype), copy=False)


def point_count(dimension: int, coord_count: int) -> int:
    """Number of complete points, protecting against a zero dimension."""
    if dimension <= 0:
        return 0
    return coord_count // dimension


def is_valid_tolerance(tol: Optional[Any]) -> bool:
    """A tolerance is usable when it is set, not a bool and strictly positive."""
    if tol is None or isinstance(tol, (bool, np.bool_)):
        return False
    try:
        # NaN compares False
        return bool(tol > 0)
    except CONVERSION_ERRORS:
        return False


def is_valid_count(value: Any, minimum: int) -> bool:
    """True when ``value`` is an integer (not a bool) of at least ``minimum``."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return False
    return value >= minimum


def squared_tolerance(tol: Any) -> float:
    """Squares a valid tolerance as a float, so integer tolerances cannot wrap."""
    return float(tol) ** 2
