# src/polysimpl/cursor.py
"""Module: polysimpl.cursor

Point-granular access to a flat coordinate array.

A :class:`PointCursor` walks a polyline ``dimension`` coordinates at a time.
It keeps two views of the same points: the original values (copied verbatim
into simplified output) and the same values in their calculation type (fed to
the distance functions). Both views are shared between clones, so cloning a
cursor only copies its position.
"""
from typing import Optional

import numpy as np

from .utils.coordinates import as_calculation_array, point_count


class PointCursor:
    """A movable position over the points of a polyline.

    Movement is clamped to the polyline: :meth:`forward` never walks past the
    last point and :meth:`backward` never walks before the first. Both return
    the number of points actually moved.
    """

    def __init__(
        self,
        points: np.ndarray,
        index: int = 0,
        calc_points: Optional[np.ndarray] = None,
    ):
        self._points = points
        self._calc = calc_points if calc_points is not None else as_calculation_array(points)
        self.index = index

    @classmethod
    def over(cls, coords: np.ndarray, dimension: int) -> "PointCursor":
        """Creates a cursor at the first point of a flat coordinate array.

        Trailing coordinates that do not form a complete point are ignored.
        """
        n = point_count(dimension, len(coords))
        points = coords[: n * dimension].reshape(n, dimension)
        return cls(points)

    # --- Position ---

    @property
    def point_count(self) -> int:
        return len(self._points)

    @property
    def remaining(self) -> int:
        """Points left after the current one."""
        return self.point_count - 1 - self.index

    @property
    def at_end(self) -> bool:
        return self.index >= self.point_count - 1

    def forward(self, n: int = 1) -> int:
        moved = max(0, min(n, self.remaining))
        self.index += moved
        return moved

    def backward(self, n: int = 1) -> int:
        moved = max(0, min(n, self.index))
        self.index -= moved
        return moved

    def clone(self, index: Optional[int] = None) -> "PointCursor":
        """Returns a new cursor over the same points, optionally repositioned."""
        return PointCursor(
            self._points,
            self.index if index is None else index,
            self._calc,
        )

    def __eq__(self, other):
        if not isinstance(other, PointCursor):
            return NotImplemented
        return self._points is other._points and self.index == other.index

    def __hash__(self):
        return hash((id(self._points), self.index))

    def __repr__(self):
        return f"PointCursor(index={self.index}, points={self.point_count})"

    # --- Values ---

    @property
    def point(self) -> np.ndarray:
        """The current point in the input's own type (read-only view)."""
        return self.point_at(self.index)

    @property
    def vector(self) -> np.ndarray:
        """The current point in its calculation type."""
        return self._calc[self.index]

    def point_at(self, index: int) -> np.ndarray:
        view = self._points[index]
        view.flags.writeable = False
        return view

    def vector_at(self, index: int) -> np.ndarray:
        return self._calc[index]
