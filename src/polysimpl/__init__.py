# src/polysimpl/__init__.py
"""
polysimpl: n-dimensional polyline simplification.

A polyline is a flat sequence of coordinates (``x0, y0, x1, y1, ...`` for two
dimensions). The library reduces the number of points of a polyline with one
of eight classic routines and measures how far the result strays from the
original:

* nth point, radial distance, perpendicular distance, Reumann-Witkam,
  Opheim and Lang (:mod:`polysimpl.algorithms`)
* Douglas-Peucker and its fixed point count variant
  (:mod:`polysimpl.douglas_peucker`)
* positional error analysis (:mod:`polysimpl.positional_error`)

Every routine can also be called by name through :func:`simplify`.
"""
from .algorithms import (
    simplify_lang,
    simplify_nth_point,
    simplify_opheim,
    simplify_perpendicular_distance,
    simplify_radial_distance,
    simplify_reumann_witkam,
)
from .api import SimplificationResult, SimplifyOptions, simplification_statistics, simplify
from .buffers import PointBuffer
from .cursor import PointCursor
from .douglas_peucker import simplify_douglas_peucker, simplify_douglas_peucker_n
from .positional_error import (
    ErrorStatistics,
    PositionalErrors,
    compute_positional_error_statistics,
    compute_positional_errors,
    compute_positional_errors2,
)
from .registry import AlgorithmRegistry, default_registry

# the easy decorator alias
register = default_registry.register

__all__ = [
    "simplify",
    "simplification_statistics",
    "register",
    "SimplifyOptions",
    "SimplificationResult",
    "AlgorithmRegistry",
    "default_registry",
    "PointCursor",
    "PointBuffer",
    "simplify_nth_point",
    "simplify_radial_distance",
    "simplify_perpendicular_distance",
    "simplify_reumann_witkam",
    "simplify_opheim",
    "simplify_lang",
    "simplify_douglas_peucker",
    "simplify_douglas_peucker_n",
    "compute_positional_errors2",
    "compute_positional_errors",
    "compute_positional_error_statistics",
    "ErrorStatistics",
    "PositionalErrors",
]
