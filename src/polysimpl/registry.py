# src/polysimpl/registry.py
"""
A name-based registry for simplification routines.

Routines are registered under one or more names and called with the
:class:`~polysimpl.api.SimplifyOptions` fields their signature asks for.
"""

import inspect
import logging
from typing import Any, Callable, Dict, List

import numpy as np

from .algorithms import (
    simplify_lang,
    simplify_nth_point,
    simplify_opheim,
    simplify_perpendicular_distance,
    simplify_radial_distance,
    simplify_reumann_witkam,
)
from .douglas_peucker import simplify_douglas_peucker, simplify_douglas_peucker_n

logger = logging.getLogger(__name__)

# Parameter names a routine may declare, and the option field feeding each
PARAMETER_FIELDS = {
    "dimension": "dimension",
    "coords": None,
    "tol": "tolerance",
    "tolerance": "tolerance",
    "min_tol": "min_tolerance",
    "max_tol": "max_tolerance",
    "n": "n",
    "repeat": "repeat",
    "look_ahead": "look_ahead",
    "count": "count",
}


class AlgorithmRegistry:
    """
    Maps algorithm names to simplification routines.

    The registry inspects each routine's signature once, at registration,
    and later passes only the options that routine declares.
    """

    def __init__(self):
        self._routines: Dict[str, Callable] = {}
        self._canonical: Dict[str, str] = {}

    @property
    def names(self) -> List[str]:
        """Returns the primary name of every registered routine."""
        return sorted(set(self._canonical.values()))

    @property
    def aliases(self) -> List[str]:
        """Returns every name a routine can be looked up by."""
        return sorted(self._routines)

    def __contains__(self, name: str) -> bool:
        return isinstance(name, str) and _normalize(name) in self._routines

    def register(self, *names: str):
        """
        Decorator to register a routine under one or more names.

        The first name is the primary one; the others are aliases. The
        decorated function may accept any combination of the following
        arguments (detected by name):

        * ``coords``: the flat coordinates to simplify
        * ``dimension``: coordinates per point
        * ``tol`` or ``tolerance``
        * ``min_tol`` and ``max_tol``
        * ``n``, ``repeat``, ``look_ahead``, ``count``

        Example:
            .. code-block:: python

                @registry.register("every_other", "eo")
                def every_other(dimension, coords):
                    ...

        Args:
            *names: One or more names (case-insensitive) to register under.
        """
        if not names:
            raise ValueError("At least one name is required")

        def decorator(func: Callable):
            params = list(inspect.signature(func).parameters)

            bad_params = [x for x in params if x not in PARAMETER_FIELDS]
            if bad_params:
                raise ValueError(
                    f"Parameter names {bad_params} not allowed. "
                    f"Allowed parameter names are: {sorted(PARAMETER_FIELDS)}"
                )

            def wrapper(coords: np.ndarray, options) -> np.ndarray:
                kwargs_all = {
                    name: coords if field is None else getattr(options, field)
                    for name, field in PARAMETER_FIELDS.items()
                }
                kwargs = {k: kwargs_all[k] for k in params}
                return func(**kwargs)

            wrapper.__wrapped__ = func
            primary = _normalize(names[0])
            for name in names:
                key = _normalize(name)
                if key in self._routines:
                    logger.debug("Replacing routine registered as %r", key)
                self._routines[key] = wrapper
                self._canonical[key] = primary
            return func

        return decorator

    def get(self, name: str) -> Callable:
        """
        Returns the wrapped routine registered as ``name``.

        The wrapper takes ``(coords, options)``.

        Raises:
            ValueError: If no routine is registered under ``name``.
        """
        if not isinstance(name, str):
            raise TypeError(f"Algorithm name must be a string, got {type(name)}")
        routine = self._routines.get(_normalize(name))
        if routine is None:
            raise ValueError(
                f"Unknown algorithm {name!r}. Registered algorithms are: {self.aliases}"
            )
        return routine

    def canonical_name(self, name: str) -> str:
        self.get(name)
        return self._canonical[_normalize(name)]

    def run(self, name: str, coords: Any, options) -> np.ndarray:
        """Runs the routine registered as ``name`` on ``coords``."""
        return self.get(name)(coords, options)


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "_").replace(" ", "_")


def register_builtin_algorithms(registry: AlgorithmRegistry) -> AlgorithmRegistry:
    """Registers the bundled routines under their usual names and abbreviations."""
    registry.register("nth_point", "np")(simplify_nth_point)
    registry.register("radial_distance", "rd")(simplify_radial_distance)
    registry.register("perpendicular_distance", "pd")(simplify_perpendicular_distance)
    registry.register("reumann_witkam", "rw")(simplify_reumann_witkam)
    registry.register("opheim", "op")(simplify_opheim)
    registry.register("lang", "la")(simplify_lang)
    registry.register("douglas_peucker", "dp")(simplify_douglas_peucker)
    registry.register("douglas_peucker_n", "dpn")(simplify_douglas_peucker_n)
    return registry


default_registry = register_builtin_algorithms(AlgorithmRegistry())
