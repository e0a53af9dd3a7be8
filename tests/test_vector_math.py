import numpy as np
import pytest

from polysimpl.utils import vector_math as vm

# --- Elementwise arithmetic ---


def test_dot_product():
    assert vm.dot([1, 2], [2, 3]) == 8.0


def test_make_vector_points_from_first_to_second():
    assert np.array_equal(vm.make_vector(np.array([1, 2]), np.array([3, 5])), [2, 3])


def test_add_subtract_multiply_return_new_arrays():
    a = np.array([1.0, 2.0])
    b = np.array([3.0, 5.0])

    assert np.array_equal(vm.add(a, b), [4.0, 7.0])
    assert np.array_equal(vm.subtract(b, a), [2.0, 3.0])
    assert np.array_equal(vm.multiply(a, 3), [3.0, 6.0])
    # inputs untouched
    assert np.array_equal(a, [1.0, 2.0])


def test_equal():
    assert vm.equal([1, 2, 3], [1.0, 2.0, 3.0])
    assert not vm.equal([1, 2, 3], [1, 2, 4])


def test_interpolate_inside_and_outside_segment():
    p1, p2 = np.array([1, 2]), np.array([2, 3])

    assert np.allclose(vm.interpolate(p1, p2, 0.5), [1.5, 2.5])
    # extrapolation
    assert np.allclose(vm.interpolate(p1, p2, -1), [0, 1])
    assert np.allclose(vm.interpolate(p1, p2, 2), [3, 4])


def test_interpolate_promotes_integers():
    """Integral points are not truncated."""
    result = vm.interpolate(np.array([1, 2, 3, 4]), np.array([4, 6, 8, 10]), 0.5)
    assert result.dtype == np.float64
    assert np.allclose(result, [2.5, 4.0, 5.5, 7.0])


# --- Distances ---


def test_point_distance2():
    assert vm.point_distance2([0, 0], [3, 4]) == 25.0
    assert vm.point_distance2([1, 1, 1], [1, 1, 1]) == 0.0


def test_point_distance2_small_integer_types_do_not_overflow():
    p1 = np.array([100, 0], dtype=np.int8)
    p2 = np.array([-100, 0], dtype=np.int8)
    assert vm.point_distance2(p1, p2) == 40000.0


def test_line_distance2_ignores_segment_bounds():
    # (5, 3) is beyond l2, but the line extends forever
    assert vm.line_distance2([0, 0], [1, 0], [5, 3]) == pytest.approx(9.0)
    assert vm.line_distance2([0, 0], [1, 0], [-5, 2]) == pytest.approx(4.0)


def test_line_distance2_degenerate_line_measures_to_point():
    assert vm.line_distance2([1, 1], [1, 1], [4, 5]) == pytest.approx(25.0)


def test_ray_distance2():
    # ahead of the origin: perpendicular distance
    assert vm.ray_distance2([0, 0], [1, 0], [7, 2]) == pytest.approx(4.0)
    # behind the origin: distance to the origin
    assert vm.ray_distance2([0, 0], [1, 0], [-3, 4]) == pytest.approx(25.0)


def test_segment_distance2_three_regions():
    s1, s2 = [0, 0], [10, 0]

    assert vm.segment_distance2(s1, s2, [5, 3]) == pytest.approx(9.0)
    # projects before s1
    assert vm.segment_distance2(s1, s2, [-3, 4]) == pytest.approx(25.0)
    # projects past s2
    assert vm.segment_distance2(s1, s2, [13, 4]) == pytest.approx(25.0)


def test_segment_distance2_degenerate_segment():
    assert vm.segment_distance2([2, 2], [2, 2], [5, 6]) == pytest.approx(25.0)


def test_segment_distance2_in_three_dimensions():
    assert vm.segment_distance2([0, 0, 0], [0, 0, 10], [3, 4, 5]) == pytest.approx(25.0)


def test_segment_distances2_matches_scalar_version():
    s1, s2 = np.array([0.0, 0.0]), np.array([10.0, 0.0])
    points = np.array([[5.0, 3.0], [-3.0, 4.0], [13.0, 4.0], [0.0, 0.0], [10.0, 0.0]])

    expected = [vm.segment_distance2(s1, s2, p) for p in points]
    assert np.allclose(vm.segment_distances2(s1, s2, points), expected)


def test_segment_distances2_degenerate_segment():
    points = np.array([[3.0, 4.0], [0.0, 1.0]])
    assert np.allclose(vm.segment_distances2([0, 0], [0, 0], points), [25.0, 1.0])
