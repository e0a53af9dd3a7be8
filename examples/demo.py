#!/usr/bin/env python
import sys

import numpy as np

import polysimpl as simpl

# One sensible parameter set per routine for a unit-scale noisy curve
DEMO_OPTIONS = simpl.SimplifyOptions(
    tolerance=0.05,
    min_tolerance=0.05,
    max_tolerance=0.5,
    n=4,
    repeat=3,
    look_ahead=8,
    count=60,
)


def noisy_polyline(count: int, seed: int = 0) -> np.ndarray:
    """A sine wave with a little jitter, as an (N, 2) array."""
    rng = np.random.default_rng(seed)
    x = np.linspace(0, 4 * np.pi, count)
    y = np.sin(x) + rng.normal(scale=0.02, size=count)
    return np.column_stack([x, y])


def main():
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 1000
    points = noisy_polyline(count)

    print(f"Simplifying a {count}-point polyline")
    print(f"{'algorithm':<24}{'points':>8}{'max err':>12}{'mean err':>12}{'std':>12}")

    for name in simpl.default_registry.names:
        report = simpl.simplification_statistics(points, name, DEMO_OPTIONS)
        stats = report.statistics
        print(
            f"{report.algorithm:<24}{report.simplified_points:>8}"
            f"{stats.max:>12.4f}{stats.mean:>12.4f}{stats.std:>12.4f}"
        )


if __name__ == "__main__":
    main()
