"""
Public API for polyline simplification by algorithm name.
"""
# src/polysimpl/api.py

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np

from .positional_error import ErrorStatistics, compute_positional_error_statistics
from .registry import AlgorithmRegistry, default_registry
from .utils.coordinates import as_numeric_array, point_count

logger = logging.getLogger(__name__)


@dataclass
class SimplifyOptions:
    """Tuning parameters for the simplification routines.

    Each routine reads only the fields it needs. A field left at ``None``
    counts as an invalid parameter, so the routine returns its input
    unchanged.
    """

    dimension: int = 2
    """Number of coordinates per point. Ignored for ``(N, DIM)`` arrays,
    whose second axis defines it. Defaults to 2.

    """

    tolerance: Optional[float] = None
    """Distance tolerance for radial distance, perpendicular distance,
    Reumann-Witkam, Lang and Douglas-Peucker.

    """

    min_tolerance: Optional[float] = None
    """Radial and point-to-ray tolerance for Opheim."""

    max_tolerance: Optional[float] = None
    """Maximum radial search distance for Opheim."""

    n: Optional[int] = None
    """Step of the nth point routine (``>= 2``)."""

    repeat: int = 1
    """Maximum number of perpendicular distance passes. Defaults to 1."""

    look_ahead: Optional[int] = None
    """Search region size, in points, for Lang (``>= 2``)."""

    count: Optional[int] = None
    """Number of points the fixed count Douglas-Peucker variant keeps."""


@dataclass
class SimplificationResult:
    """A simplification together with its positional error statistics."""

    algorithm: str
    simplified: np.ndarray
    original_points: int
    simplified_points: int
    statistics: ErrorStatistics
    valid: bool


def _resolve_options(
    options: Optional[SimplifyOptions], overrides: dict
) -> SimplifyOptions:
    if options is None:
        options = SimplifyOptions()
    elif not isinstance(options, SimplifyOptions):
        raise TypeError("The 'options' argument must be a SimplifyOptions object.")

    if overrides:
        # raises TypeError for unknown fields
        options = dataclasses.replace(options, **overrides)
    return options


def _flatten(polyline: Any, options: SimplifyOptions) -> Tuple[np.ndarray, SimplifyOptions, bool]:
    """
    Flattens ``(N, DIM)`` input, taking the dimension from its shape.

    Returns the flat coordinates, the effective options and whether the
    input was two-dimensional.
    """
    arr = as_numeric_array(polyline)
    if arr.ndim > 2:
        raise ValueError(f"Expected a flat or (N, DIM) polyline, got shape {arr.shape}")
    if arr.ndim == 2:
        options = dataclasses.replace(options, dimension=int(arr.shape[1]))
        return arr.reshape(-1), options, True
    return arr.reshape(-1), options, False


def simplify(
    polyline: Any,
    algorithm: str,
    options: Optional[SimplifyOptions] = None,
    registry: Optional[AlgorithmRegistry] = None,
    **overrides: Any,
) -> np.ndarray:
    """High-level entry point to simplify a polyline.

    Example:
        .. code-block:: python

            simplified = simplify(points, "douglas_peucker", tolerance=0.5)

    Args:
        polyline: Flat coordinates (``x0, y0, x1, y1, ...``) or an ``(N, DIM)``
            array-like of points.
        algorithm: Name (or abbreviation) of a registered routine, e.g.
            ``"douglas_peucker"`` or ``"dp"``.
        options: Tuning parameters. If ``None``, defaults are used.
        registry: The :class:`~polysimpl.registry.AlgorithmRegistry` to use.
            Defaults to the global ``default_registry``.
        **overrides: Replace individual ``options`` fields.

    Returns:
        np.ndarray: The simplified polyline, flat or ``(M, DIM)`` to match
        the input.

    Raises:
        TypeError: If the coordinates are not numeric or an override names
            an unknown option.
        ValueError: If ``algorithm`` is not registered.
    """
    # Use the global default if none provided
    if registry is None:
        registry = default_registry

    options = _resolve_options(options, overrides)
    coords, options, shaped = _flatten(polyline, options)

    result = registry.run(algorithm, coords, options)

    logger.debug(
        "%s: %d -> %d points",
        algorithm,
        point_count(options.dimension, len(coords)),
        point_count(options.dimension, len(result)),
    )

    if shaped and options.dimension > 0:
        return result.reshape(-1, options.dimension)
    return result


def simplification_statistics(
    polyline: Any,
    algorithm: str,
    options: Optional[SimplifyOptions] = None,
    registry: Optional[AlgorithmRegistry] = None,
    **overrides: Any,
) -> SimplificationResult:
    """Simplifies ``polyline`` and measures the positional error of the result.

    Takes the same arguments as :func:`simplify`.
    """
    if registry is None:
        registry = default_registry

    options = _resolve_options(options, overrides)
    coords, options, _ = _flatten(polyline, options)
    simplified = registry.run(algorithm, coords, options)

    stats, valid = compute_positional_error_statistics(options.dimension, coords, simplified)
    if not valid:
        logger.debug("%s: positional errors could not be computed", algorithm)

    return SimplificationResult(
        algorithm=registry.canonical_name(algorithm),
        simplified=simplified,
        original_points=point_count(options.dimension, len(coords)),
        simplified_points=point_count(options.dimension, len(simplified)),
        statistics=stats,
        valid=valid,
    )
