# src/polysimpl/utils/__init__.py
"""
Utility modules for coordinate conversion and vector math.
"""
from .coordinates import (
    as_coordinate_array,
    calculation_dtype,
)
from .vector_math import (
    line_distance2,
    point_distance2,
    ray_distance2,
    segment_distance2,
)

__all__ = [
    "as_coordinate_array",
    "calculation_dtype",
    "line_distance2",
    "point_distance2",
    "ray_distance2",
    "segment_distance2",
]
