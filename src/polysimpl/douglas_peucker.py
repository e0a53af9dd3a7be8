# src/polysimpl/douglas_peucker.py
"""Module: polysimpl.douglas_peucker

Douglas-Peucker approximation and its fixed point count variant.

Both routines repeatedly split a sub-polyline at its *key*: the interior point
farthest from the segment joining the sub-polyline's end points.

* :func:`simplify_douglas_peucker` splits while the key lies farther than the
  tolerance, working depth-first from a stack. A radial distance pass runs
  first to cut the work down.
* :func:`simplify_douglas_peucker_n` always splits the sub-polyline with the
  globally largest key distance next, until the requested number of points is
  reached.
"""
import heapq
import itertools
import logging
from dataclasses import dataclass
from typing import Any, List, Tuple

import numpy as np

from .algorithms import check_input, radial_distance_pass
from .buffers import PointBuffer
from .cursor import PointCursor
from .utils.coordinates import (
    as_calculation_array,
    as_coordinate_array,
    is_valid_count,
    is_valid_tolerance,
    point_count,
    squared_tolerance,
)
from .utils.vector_math import segment_distances2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubPolyline:
    """A contiguous run of points, given by the indices of its end points."""

    first: int
    last: int


@dataclass(frozen=True)
class KeyInfo:
    """The key of a sub-polyline and its squared distance to the segment."""

    index: int
    dist2: float = 0.0


def find_key(vectors: np.ndarray, sub: SubPolyline) -> KeyInfo:
    """
    Finds the interior point of ``sub`` farthest from segment ``first``-``last``.

    When several points share the maximum distance the last of them wins. A
    sub-polyline without interior points reports its own ``last`` index with
    a distance of zero.

    Args:
        vectors: ``(n, dimension)`` array of points in their calculation type.
        sub: The sub-polyline to examine.
    """
    if sub.last - sub.first < 2:
        return KeyInfo(sub.last)

    d2 = segment_distances2(
        vectors[sub.first], vectors[sub.last], vectors[sub.first + 1 : sub.last]
    )
    offset = len(d2) - 1 - int(np.argmax(d2[::-1]))
    return KeyInfo(sub.first + 1 + offset, float(d2[offset]))


def _approximate(vectors: np.ndarray, tol2) -> np.ndarray:
    """Marks the keys found by depth-first splitting. Returns a boolean mask."""
    n = len(vectors)
    keys = np.zeros(n, dtype=bool)
    keys[0] = keys[n - 1] = True

    stack: List[SubPolyline] = [SubPolyline(0, n - 1)]
    while stack:
        sub = stack.pop()
        key = find_key(vectors, sub)
        if key.index != sub.last and tol2 < key.dist2:
            keys[key.index] = True
            # left half is processed first
            stack.append(SubPolyline(key.index, sub.last))
            stack.append(SubPolyline(sub.first, key.index))
    return keys


def _approximate_n(vectors: np.ndarray, count: int) -> np.ndarray:
    """Marks ``count`` keys, always splitting at the farthest pending key."""
    n = len(vectors)
    keys = np.zeros(n, dtype=bool)
    keys[0] = keys[n - 1] = True
    key_count = 2

    # max-heap on distance; equal distances pop in insertion order
    tie_breaker = itertools.count()
    queue: List[Tuple[float, int, SubPolyline, KeyInfo]] = []

    def push(sub: SubPolyline) -> None:
        key = find_key(vectors, sub)
        if key.index != sub.last:
            heapq.heappush(queue, (-key.dist2, next(tie_breaker), sub, key))

    push(SubPolyline(0, n - 1))
    while queue and key_count < count:
        _, _, sub, key = heapq.heappop(queue)
        keys[key.index] = True
        key_count += 1
        push(SubPolyline(sub.first, key.index))
        push(SubPolyline(key.index, sub.last))
    return keys


def simplify_douglas_peucker(dimension: int, coords: Any, tol) -> np.ndarray:
    """
    Douglas-Peucker approximation with a radial distance pre-pass.

    Args:
        dimension: Number of coordinates per point.
        coords: Flat coordinate sequence.
        tol: Point-to-segment distance tolerance; must be ``> 0``.

    Returns:
        np.ndarray: The simplified flat coordinates.
    """
    coords = as_coordinate_array(coords)
    early = check_input(
        "douglas_peucker", dimension, coords, is_valid_tolerance(tol), f"invalid tol={tol!r}"
    )
    if early is not None:
        return early

    tol2 = squared_tolerance(tol)
    cursor = PointCursor.over(coords, dimension)
    with PointBuffer(cursor.point_count, dimension, coords.dtype) as reduced:
        radial_distance_pass(cursor, tol2, reduced)
        logger.debug(
            "douglas_peucker: radial pre-pass kept %d of %d points",
            len(reduced),
            cursor.point_count,
        )
        keys = _approximate(as_calculation_array(reduced.points), tol2)
        return reduced.points[keys].reshape(-1).copy()


def simplify_douglas_peucker_n(dimension: int, coords: Any, count: int) -> np.ndarray:
    """
    Douglas-Peucker variant that produces exactly ``count`` points.

    Each step adds the single point farthest from the current simplification.
    Polylines of ``count`` points or fewer are returned unchanged.

    Args:
        dimension: Number of coordinates per point.
        coords: Flat coordinate sequence.
        count: Number of points to keep; must be an integer ``>= 2``.
    """
    coords = as_coordinate_array(coords)
    early = check_input(
        "douglas_peucker_n", dimension, coords, is_valid_count(count, 2), f"invalid count={count!r}"
    )
    if early is not None:
        return early

    n = point_count(dimension, len(coords))
    if count >= n:
        logger.debug("douglas_peucker_n: %d points already within count %d", n, count)
        return coords.copy()

    points = coords.reshape(n, dimension)
    keys = _approximate_n(as_calculation_array(points), count)
    return points[keys].reshape(-1).copy()
