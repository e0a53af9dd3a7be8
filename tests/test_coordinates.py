from collections import deque

import numpy as np
import pytest

from polysimpl.utils.coordinates import (
    as_calculation_array,
    as_coordinate_array,
    calculation_dtype,
    is_valid_count,
    is_valid_tolerance,
    point_count,
    squared_tolerance,
)

# --- as_coordinate_array ---


def test_array_input_is_flattened_without_copy():
    arr = np.arange(6, dtype=np.int32).reshape(3, 2)
    flat = as_coordinate_array(arr)

    assert flat.shape == (6,)
    assert flat.dtype == np.int32
    assert np.shares_memory(flat, arr)


def test_sequences_and_iterables():
    assert np.array_equal(as_coordinate_array([1, 2, 3, 4]), [1, 2, 3, 4])
    assert np.array_equal(as_coordinate_array((1.5, 2.5)), [1.5, 2.5])
    assert np.array_equal(as_coordinate_array(deque([1, 2])), [1, 2])
    assert np.array_equal(as_coordinate_array(range(4)), [0, 1, 2, 3])


def test_generators_are_consumed_once():
    gen = (float(x) for x in range(6))
    assert len(as_coordinate_array(gen)) == 6
    # exhausted now
    assert len(list(gen)) == 0


def test_empty_input():
    assert len(as_coordinate_array([])) == 0


@pytest.mark.parametrize(
    "bad",
    [
        ["a", "b"],
        "1234",
        [1, None, 3],
        [True, False],
        [1 + 2j, 3],
        42,
    ],
)
def test_non_numeric_input_raises_type_error(bad):
    with pytest.raises(TypeError):
        as_coordinate_array(bad)


def test_ragged_input_raises_type_error():
    with pytest.raises(TypeError):
        as_coordinate_array([[1, 2], [3]])


# --- Calculation type ---


@pytest.mark.parametrize(
    "dtype, expected",
    [
        (np.int8, np.float64),
        (np.int64, np.float64),
        (np.uint16, np.float64),
        (np.float32, np.float32),
        (np.float64, np.float64),
    ],
)
def test_calculation_dtype(dtype, expected):
    assert calculation_dtype(dtype) == np.dtype(expected)


def test_as_calculation_array_keeps_floats():
    arr = np.array([1.0, 2.0], dtype=np.float32)
    assert as_calculation_array(arr) is arr
    assert as_calculation_array(np.array([1, 2])).dtype == np.float64


# --- Validation helpers ---


def test_point_count_protects_against_zero_dimension():
    assert point_count(2, 7) == 3
    assert point_count(0, 7) == 0
    assert point_count(-1, 7) == 0


@pytest.mark.parametrize("tol", [0.1, 1, np.float32(2.0), 1e-300])
def test_valid_tolerances(tol):
    assert is_valid_tolerance(tol)


@pytest.mark.parametrize("tol", [0, 0.0, -1, None, float("nan"), "1.0", True, np.bool_(True)])
def test_invalid_tolerances(tol):
    assert not is_valid_tolerance(tol)


def test_is_valid_count():
    assert is_valid_count(2, 2)
    assert is_valid_count(np.int64(5), 2)
    assert not is_valid_count(1, 2)
    assert not is_valid_count(2.0, 2)
    assert not is_valid_count(True, 1)
    assert not is_valid_count(None, 2)


def test_squared_tolerance_is_a_float():
    tol2 = squared_tolerance(np.int16(200))
    assert isinstance(tol2, float)
    assert tol2 == 40000.0
