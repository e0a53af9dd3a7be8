# src/polysimpl/buffers.py
"""
Fixed-capacity scratch storage for intermediate simplification results.

Multi-pass routines (repeated perpendicular distance, Douglas-Peucker with its
radial distance pre-pass) collect a pass into a :class:`PointBuffer` and run
the next pass over its contents. Every routine also uses one as its output
sink, so the final result is a trimmed copy with the input's type.
"""
from typing import Optional

import numpy as np


class PointBuffer:
    """Append-only point storage with a capacity fixed up front.

    Usable as a context manager; leaving the block releases the storage.

    Example:
        .. code-block:: python

            with PointBuffer(capacity=len(points), dimension=2, dtype=float) as out:
                out.append(points[0])
                ...
                simplified = out.result()
    """

    def __init__(self, capacity: int, dimension: int, dtype=np.float64):
        if capacity < 0 or dimension <= 0:
            raise ValueError(
                f"Invalid buffer shape: capacity={capacity}, dimension={dimension}"
            )
        self.dimension = dimension
        self._data: Optional[np.ndarray] = np.empty((capacity, dimension), dtype=dtype)
        self._size = 0

    def __enter__(self) -> "PointBuffer":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.release()
        return False

    @property
    def capacity(self) -> int:
        return 0 if self._data is None else len(self._data)

    def __len__(self) -> int:
        return self._size

    def _storage(self) -> np.ndarray:
        if self._data is None:
            raise RuntimeError("PointBuffer used after release")
        return self._data

    def append(self, point: np.ndarray) -> None:
        """Copies one point into the next free slot."""
        data = self._storage()
        if self._size >= len(data):
            raise IndexError(f"PointBuffer is full ({len(data)} points)")
        data[self._size] = point
        self._size += 1

    def clear(self) -> None:
        """Forgets the contents but keeps the storage for reuse."""
        self._size = 0

    def release(self) -> None:
        self._data = None
        self._size = 0

    @property
    def points(self) -> np.ndarray:
        """The filled part of the buffer as a ``(len, dimension)`` view."""
        return self._storage()[: self._size]

    @property
    def coords(self) -> np.ndarray:
        """The filled part of the buffer as a flat view."""
        return self.points.reshape(-1)

    def result(self) -> np.ndarray:
        """Returns a flat copy of the contents, independent of the buffer."""
        return self.coords.copy()
