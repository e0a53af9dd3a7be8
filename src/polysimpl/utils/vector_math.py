# src/polysimpl/utils/vector_math.py
"""
Vector math primitives used by the simplification and error routines.

Points and vectors are 1-D numpy arrays holding ``dimension`` coordinates.
Every function is pure: arguments are never modified and new arrays are
returned. Anything that divides runs in the calculation type of its inputs
(see :func:`~polysimpl.utils.coordinates.calculation_dtype`), so integral
coordinates never truncate an intermediate result.
"""
from typing import Tuple

import numpy as np

from .coordinates import calculation_dtype


def _promote(*points) -> Tuple[np.ndarray, ...]:
    arrays = [np.asarray(p) for p in points]
    dtype = calculation_dtype(np.result_type(*arrays))
    return tuple(a.astype(dtype, copy=False) for a in arrays)


def equal(p1, p2) -> bool:
    """True when both points have identical coordinates."""
    return bool(np.array_equal(p1, p2))


def add(v1, v2) -> np.ndarray:
    return np.add(v1, v2)


def subtract(v1, v2) -> np.ndarray:
    """Returns ``v1 - v2``."""
    return np.subtract(v1, v2)


def make_vector(p1, p2) -> np.ndarray:
    """Returns the vector pointing from ``p1`` to ``p2`` (``p2 - p1``)."""
    return np.subtract(p2, p1)


def multiply(v, scalar) -> np.ndarray:
    return np.multiply(v, scalar)


def dot(v1, v2) -> float:
    v1, v2 = _promote(v1, v2)
    return float(np.dot(v1, v2))


def interpolate(p1, p2, fraction: float) -> np.ndarray:
    """
    Returns the point at ``fraction`` of the way from ``p1`` to ``p2``.

    Fractions outside ``[0, 1]`` extrapolate along the same line.
    """
    p1, p2 = _promote(p1, p2)
    return p1 + (p2 - p1) * fraction


def point_distance2(p1, p2) -> float:
    """Squared Euclidean distance between two points."""
    p1, p2 = _promote(p1, p2)
    diff = p2 - p1
    return float(np.dot(diff, diff))


def _projection(a: np.ndarray, b: np.ndarray, p: np.ndarray) -> Tuple[np.ndarray, float, float]:
    # direction, and the projections of (p - a) and direction onto direction
    v = b - a
    w = p - a
    return v, float(np.dot(w, v)), float(np.dot(v, v))


def line_distance2(l1, l2, p) -> float:
    """
    Squared distance from ``p`` to the infinite line through ``l1`` and ``l2``.

    A degenerate line (``l1 == l2``) measures the distance to ``l1``.
    """
    l1, l2, p = _promote(l1, l2, p)
    v, cw, cv = _projection(l1, l2, p)
    fraction = 0.0 if cv == 0 else cw / cv
    return point_distance2(l1 + v * fraction, p)


def ray_distance2(r1, r2, p) -> float:
    """
    Squared distance from ``p`` to the ray starting at ``r1`` through ``r2``.

    Points behind the origin measure to ``r1``.
    """
    r1, r2, p = _promote(r1, r2, p)
    v, cw, cv = _projection(r1, r2, p)
    if cw <= 0:
        return point_distance2(p, r1)
    fraction = 0.0 if cv == 0 else cw / cv
    return point_distance2(r1 + v * fraction, p)


def segment_distance2(s1, s2, p) -> float:
    """
    Squared distance from ``p`` to the segment ``s1``-``s2``.

    Points projecting before ``s1`` measure to ``s1``, points projecting past
    ``s2`` measure to ``s2``.
    """
    s1, s2, p = _promote(s1, s2, p)
    v, cw, cv = _projection(s1, s2, p)
    if cw <= 0:
        return point_distance2(p, s1)
    if cv <= cw:
        return point_distance2(p, s2)
    fraction = 0.0 if cv == 0 else cw / cv
    return point_distance2(s1 + v * fraction, p)


def segment_distances2(s1, s2, points) -> np.ndarray:
    """
    Vectorized :func:`segment_distance2` for a ``(n, dimension)`` array of
    points. Returns an array of ``n`` squared distances.
    """
    s1, s2, points = _promote(s1, s2, points)
    v = s2 - s1
    w = points - s1
    cw = w @ v
    cv = float(np.dot(v, v))

    to_s1 = np.einsum("ij,ij->i", w, w)
    to_s2 = np.einsum("ij,ij->i", points - s2, points - s2)
    if cv == 0:
        return to_s1

    proj = s1 + np.outer(cw / cv, v)
    to_proj = np.einsum("ij,ij->i", points - proj, points - proj)
    return np.where(cw <= 0, to_s1, np.where(cv <= cw, to_s2, to_proj))
