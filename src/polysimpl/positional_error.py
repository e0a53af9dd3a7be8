# src/polysimpl/positional_error.py
"""
Positional error analysis.

The positional error of an original point is its distance to the segment of
the simplification that stands in for it. Both polylines are walked in
lock-step: every simplification vertex must reappear, coordinate for
coordinate, in the original, and the original points between two matched
vertices are measured against the segment joining them.
"""
import logging
from dataclasses import dataclass
from typing import Any, List, NamedTuple, Tuple

import numpy as np

from .cursor import PointCursor
from .utils.coordinates import as_coordinate_array, calculation_dtype, point_count
from .utils.vector_math import equal, segment_distance2

logger = logging.getLogger(__name__)


class PositionalErrors(NamedTuple):
    """Per-point errors and whether the simplification matched the original."""

    errors: np.ndarray
    valid: bool


@dataclass
class ErrorStatistics:
    """Summary of the positional errors of one simplification.

    All fields are zero when the errors could not be computed.
    """

    max: float = 0.0
    """Largest positional error."""

    sum: float = 0.0
    """Sum of all positional errors."""

    mean: float = 0.0
    """``sum`` divided by the number of errors."""

    std: float = 0.0
    """Population standard deviation of the errors."""


def _invalid(dtype, reason: str) -> PositionalErrors:
    logger.debug("positional errors: %s", reason)
    return PositionalErrors(np.empty(0, dtype=dtype), False)


def _unmatched(errors: List[float], dtype, vertex: int) -> PositionalErrors:
    logger.debug("positional errors: vertex %d not found in the original", vertex)
    return PositionalErrors(np.asarray(errors, dtype=dtype), False)


def compute_positional_errors2(
    dimension: int, original: Any, simplified: Any
) -> PositionalErrors:
    """
    Computes the squared positional error of each original point.

    Args:
        dimension: Number of coordinates per point.
        original: Flat coordinates of the original polyline.
        simplified: Flat coordinates of a simplification of ``original``.

    Every simplification vertex must match an original point strictly after
    the one matched by its predecessor, so repeated vertices (a closed ring
    reduced to its start point, say) still account for the points between
    them.

    Returns:
        PositionalErrors: ``errors`` holds one squared distance per original
        point consumed by the walk. ``valid`` is ``False`` when the inputs are
        malformed, the first points differ or a simplification vertex is not
        found in the original; errors gathered before the failure are kept.

    Raises:
        TypeError: If either polyline is not numeric or ``dimension`` is not
            an integer.
    """
    original = as_coordinate_array(original)
    simplified = as_coordinate_array(simplified)
    if isinstance(dimension, bool) or not isinstance(dimension, (int, np.integer)):
        raise TypeError(f"dimension must be an integer, got {type(dimension)}")

    dtype = calculation_dtype(np.result_type(original.dtype, simplified.dtype))

    if dimension <= 0:
        return _invalid(dtype, f"dimension {dimension}")
    if len(original) % dimension or len(simplified) % dimension:
        return _invalid(dtype, "coordinate count is not a multiple of dimension")

    original_count = point_count(dimension, len(original))
    simplified_count = point_count(dimension, len(simplified))
    if original_count < 2 or simplified_count < 2:
        return _invalid(dtype, "polylines need at least 2 points")
    if original_count < simplified_count:
        return _invalid(dtype, "simplification has more points than the original")

    orig = PointCursor.over(original, dimension)
    simp = PointCursor.over(simplified, dimension)
    if not equal(orig.point, simp.point):
        return _invalid(dtype, "first points differ")

    errors: List[float] = []
    s1 = simp.vector
    while simp.forward():
        s2 = simp.vector
        # the vertex matching s1 lies on the segment
        errors.append(0.0)
        if not orig.forward():
            return _unmatched(errors, dtype, simp.index)
        # original points up to (excluding) the one matching s2
        while not equal(orig.point, simp.point):
            errors.append(segment_distance2(s1, s2, orig.vector))
            if not orig.forward():
                return _unmatched(errors, dtype, simp.index)
        s1 = s2

    # the matched last vertex
    errors.append(0.0)
    return PositionalErrors(np.asarray(errors, dtype=dtype), True)


def compute_positional_errors(
    dimension: int, original: Any, simplified: Any
) -> PositionalErrors:
    """Like :func:`compute_positional_errors2`, with plain (not squared) distances."""
    errors, valid = compute_positional_errors2(dimension, original, simplified)
    return PositionalErrors(np.sqrt(errors), valid)


def compute_positional_error_statistics(
    dimension: int, original: Any, simplified: Any
) -> Tuple[ErrorStatistics, bool]:
    """
    Folds the positional errors into :class:`ErrorStatistics`.

    Returns zeroed statistics and ``False`` when the errors are invalid.
    """
    errors, valid = compute_positional_errors(dimension, original, simplified)
    if not valid or len(errors) == 0:
        return ErrorStatistics(), False

    total = float(np.sum(errors))
    return (
        ErrorStatistics(
            max=float(np.max(errors)),
            sum=total,
            mean=total / len(errors),
            std=float(np.std(errors)),
        ),
        True,
    )
