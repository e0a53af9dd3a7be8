# src/polysimpl/algorithms.py
"""
The single-pass polyline simplification routines.

Every routine takes the point ``dimension``, a flat sequence of coordinates
(``x0, y0, x1, y1, ...`` for ``dimension=2``) and its own parameters, and
returns a new flat numpy array holding the retained points in their original
order. The input is never modified.

The routines share one validation policy:

* ``dimension <= 0`` produces an empty result.
* A coordinate count that is not a multiple of ``dimension``, a polyline of
  fewer than three points or an invalid parameter produces an exact copy of
  the input.

Otherwise the first and last points are always part of the result.
Douglas-Peucker lives in :mod:`polysimpl.douglas_peucker`.
"""
import logging
from typing import Any, Optional

import numpy as np

from .buffers import PointBuffer
from .cursor import PointCursor
from .utils.coordinates import (
    as_coordinate_array,
    is_valid_count,
    is_valid_tolerance,
    point_count,
    squared_tolerance,
)
from .utils.vector_math import (
    line_distance2,
    point_distance2,
    ray_distance2,
    segment_distance2,
)

logger = logging.getLogger(__name__)


# --- Shared validation ---


def check_input(
    routine: str,
    dimension: int,
    coords: np.ndarray,
    params_ok: bool = True,
    reason: str = "",
) -> Optional[np.ndarray]:
    """
    Applies the common validation policy.

    Returns the early result (empty array or input copy) when the polyline
    should not be simplified, or ``None`` when the routine may run.

    Raises:
        TypeError: If ``dimension`` is not an integer.
    """
    if isinstance(dimension, bool) or not isinstance(dimension, (int, np.integer)):
        raise TypeError(f"dimension must be an integer, got {type(dimension)}")

    if dimension <= 0:
        logger.debug("%s: dimension %s, returning empty result", routine, dimension)
        return coords[:0].copy()

    if len(coords) % dimension:
        reason = f"{len(coords)} coordinates do not form {dimension}-d points"
    elif point_count(dimension, len(coords)) < 3:
        reason = "fewer than 3 points"
    elif params_ok:
        return None

    logger.debug("%s: copying input unchanged (%s)", routine, reason)
    return coords.copy()


# --- Nth point ---


def simplify_nth_point(dimension: int, coords: Any, n: int) -> np.ndarray:
    """
    Keeps the first point, every ``n``-th point after it and the last point.

    Args:
        dimension: Number of coordinates per point.
        coords: Flat coordinate sequence.
        n: Step between retained points; must be an integer ``>= 2``.

    Returns:
        np.ndarray: The simplified flat coordinates.
    """
    coords = as_coordinate_array(coords)
    early = check_input(
        "nth_point", dimension, coords, is_valid_count(n, 2), f"invalid n={n!r}"
    )
    if early is not None:
        return early

    cursor = PointCursor.over(coords, dimension)
    with PointBuffer(cursor.point_count, dimension, coords.dtype) as out:
        out.append(cursor.point)
        while cursor.forward(n):
            out.append(cursor.point)
        return out.result()


# --- Radial distance ---


def radial_distance_pass(cursor: PointCursor, tol2, out: PointBuffer) -> None:
    key = cursor.vector
    out.append(cursor.point)
    cursor.forward()
    # first and last point are always kept
    while not cursor.at_end:
        if tol2 <= point_distance2(key, cursor.vector):
            key = cursor.vector
            out.append(cursor.point)
        cursor.forward()
    out.append(cursor.point)


def simplify_radial_distance(dimension: int, coords: Any, tol) -> np.ndarray:
    """
    Drops every point that lies closer than ``tol`` to the most recent key.

    Points are examined in order; a point at distance ``>= tol`` from the
    current key becomes the new key.

    Args:
        dimension: Number of coordinates per point.
        coords: Flat coordinate sequence.
        tol: Radial distance tolerance; must be ``> 0``.
    """
    coords = as_coordinate_array(coords)
    early = check_input(
        "radial_distance", dimension, coords, is_valid_tolerance(tol), f"invalid tol={tol!r}"
    )
    if early is not None:
        return early

    cursor = PointCursor.over(coords, dimension)
    with PointBuffer(cursor.point_count, dimension, coords.dtype) as out:
        radial_distance_pass(cursor, squared_tolerance(tol), out)
        return out.result()


# --- Perpendicular distance ---


def _perpendicular_distance_pass(points: np.ndarray, tol2, out: PointBuffer) -> None:
    """One PD pass over a ``(n, dimension)`` array. Copies when under 3 points."""
    cursor = PointCursor(points)
    n = cursor.point_count
    if n < 3:
        for i in range(n):
            out.append(cursor.point_at(i))
        return

    vec = cursor.vector_at
    i0, i1, i2 = 0, 1, 2
    out.append(cursor.point_at(0))

    while i2 < n:
        # test the middle point against the segment spanning its neighbours
        if segment_distance2(vec(i0), vec(i2), vec(i1)) < tol2:
            out.append(cursor.point_at(i2))
            i0 = i2
            i1 += 2
            if i1 == n:
                break
            i2 += 2
        else:
            out.append(cursor.point_at(i1))
            i0 = i1
            i1 = i2
            i2 += 1

    if i1 != n:
        out.append(cursor.point_at(i1))


def simplify_perpendicular_distance(
    dimension: int, coords: Any, tol, repeat: int = 1
) -> np.ndarray:
    """
    Removes points whose distance to the segment joining their neighbours is
    below ``tol``.

    Consecutive points are never both removed within a pass. With
    ``repeat > 1`` the routine is re-applied to its own output up to
    ``repeat`` times in total, stopping early once a pass removes nothing.

    Args:
        dimension: Number of coordinates per point.
        coords: Flat coordinate sequence.
        tol: Perpendicular (point-to-segment) distance tolerance; must be ``> 0``.
        repeat: Number of passes; must be an integer ``>= 1``.
    """
    coords = as_coordinate_array(coords)
    early = check_input(
        "perpendicular_distance",
        dimension,
        coords,
        is_valid_tolerance(tol) and is_valid_count(repeat, 1),
        f"invalid tol={tol!r} or repeat={repeat!r}",
    )
    if early is not None:
        return early

    tol2 = squared_tolerance(tol)
    n = point_count(dimension, len(coords))
    points = coords.reshape(n, dimension)

    with PointBuffer(n, dimension, coords.dtype) as current:
        _perpendicular_distance_pass(points, tol2, current)
        passes = 1
        if repeat == 1 or len(current) == n:
            return current.result()

        with PointBuffer(len(current), dimension, coords.dtype) as scratch:
            while passes < repeat:
                scratch.clear()
                _perpendicular_distance_pass(current.points, tol2, scratch)
                passes += 1
                if len(scratch) == len(current):
                    break
                current, scratch = scratch, current

            logger.debug("perpendicular_distance: stopped after %d passes", passes)
            return current.result()


# --- Reumann-Witkam ---


def simplify_reumann_witkam(dimension: int, coords: Any, tol) -> np.ndarray:
    """
    Keeps a point when the next point leaves the strip of half-width ``tol``
    around the line through the current key and its successor.

    Args:
        dimension: Number of coordinates per point.
        coords: Flat coordinate sequence.
        tol: Perpendicular (point-to-line) distance tolerance; must be ``> 0``.
    """
    coords = as_coordinate_array(coords)
    early = check_input(
        "reumann_witkam", dimension, coords, is_valid_tolerance(tol), f"invalid tol={tol!r}"
    )
    if early is not None:
        return early

    tol2 = squared_tolerance(tol)
    cursor = PointCursor.over(coords, dimension)
    vec = cursor.vector_at

    # the strip is defined by the line L(p0, p1)
    p0, p1 = 0, 1
    pj = 1

    with PointBuffer(cursor.point_count, dimension, coords.dtype) as out:
        out.append(cursor.point_at(0))
        for j in range(2, cursor.point_count):
            pi, pj = pj, j
            if line_distance2(vec(p0), vec(p1), vec(pj)) < tol2:
                continue
            out.append(cursor.point_at(pi))
            p0, p1 = pi, pj
        out.append(cursor.point_at(pj))
        return out.result()


# --- Opheim ---


def simplify_opheim(dimension: int, coords: Any, min_tol, max_tol) -> np.ndarray:
    """
    Reumann-Witkam variant that bounds the search region.

    Points within ``min_tol`` of the current key are skipped; the last of them
    fixes the direction of a ray from the key. Subsequent points are dropped
    while they stay within ``min_tol`` of that ray and within ``max_tol`` of
    the key.

    Args:
        dimension: Number of coordinates per point.
        coords: Flat coordinate sequence.
        min_tol: Radial and point-to-ray distance tolerance; must be ``> 0``.
        max_tol: Maximum radial distance from the key; must be ``> 0``.
    """
    coords = as_coordinate_array(coords)
    early = check_input(
        "opheim",
        dimension,
        coords,
        is_valid_tolerance(min_tol) and is_valid_tolerance(max_tol),
        f"invalid min_tol={min_tol!r} or max_tol={max_tol!r}",
    )
    if early is not None:
        return early

    min_tol2 = squared_tolerance(min_tol)
    max_tol2 = squared_tolerance(max_tol)
    cursor = PointCursor.over(coords, dimension)
    vec = cursor.vector_at

    # ray R(r0, r1); r1 is unset until a point leaves the minimum tolerance
    r0 = 0
    r1 = None
    pj = 1

    with PointBuffer(cursor.point_count, dimension, coords.dtype) as out:
        out.append(cursor.point_at(0))
        for j in range(2, cursor.point_count):
            pi, pj = pj, j

            if r1 is None:
                if point_distance2(vec(r0), vec(pj)) < min_tol2:
                    continue
                r1 = pi

            if (
                point_distance2(vec(r0), vec(pj)) < max_tol2
                and ray_distance2(vec(r0), vec(r1), vec(pj)) < min_tol2
            ):
                continue

            out.append(cursor.point_at(pi))
            r0 = pi
            r1 = None

        out.append(cursor.point_at(pj))
        return out.result()


# --- Lang ---


def simplify_lang(dimension: int, coords: Any, tol, look_ahead: int) -> np.ndarray:
    """
    Fits the longest segment (of at most ``look_ahead`` points) from the
    current key whose intermediate points all lie within ``tol`` of it.

    When an intermediate point is too far away, the segment end is pulled
    back one point and the test repeats.

    Args:
        dimension: Number of coordinates per point.
        coords: Flat coordinate sequence.
        tol: Perpendicular (point-to-segment) distance tolerance; must be ``> 0``.
        look_ahead: Size of the search region; must be an integer ``>= 2``.
    """
    coords = as_coordinate_array(coords)
    early = check_input(
        "lang",
        dimension,
        coords,
        is_valid_tolerance(tol) and is_valid_count(look_ahead, 2),
        f"invalid tol={tol!r} or look_ahead={look_ahead!r}",
    )
    if early is not None:
        return early

    tol2 = squared_tolerance(tol)
    current = PointCursor.over(coords, dimension)
    nxt = current.clone()
    moved = nxt.forward(look_ahead)

    with PointBuffer(current.point_count, dimension, coords.dtype) as out:
        out.append(current.point)

        while moved:
            d2 = 0.0
            for index in range(current.index + 1, nxt.index):
                d2 = max(
                    d2,
                    segment_distance2(current.vector, nxt.vector, current.vector_at(index)),
                )
                if tol2 < d2:
                    break

            if d2 < tol2:
                current = nxt.clone()
                out.append(current.point)
                moved = nxt.forward(look_ahead)
            else:
                nxt.backward()

        return out.result()
