"""Leaf-node ring helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray


def as_ring(path: Sequence[Sequence[float]] | NDArray[np.float64]) -> NDArray[np.float64]:
    """Nx2 array of the path, closed (first point repeated at the end)."""
    points = np.asarray(path, dtype=np.float64).reshape(-1, 2)
    if len(points) and not np.array_equal(points[0], points[-1]):
        points = np.vstack([points, points[:1]])
    return points


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area. Positive = CCW, Negative = CW."""
    points = as_ring(points)
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))


def winding_number(point: tuple[float, float], polygon_points: NDArray[np.float64]) -> int:
    """Compute winding number of point w.r.t. a closed ring.

    Counter-clockwise rings count +1, clockwise rings -1.
    """
    px, py = point
    ring = as_ring(polygon_points)
    x = ring[:, 0]
    y = ring[:, 1]
    n = len(x)

    wn = 0
    for i in range(n - 1):
        if y[i] <= py:
            if y[i + 1] > py:
                # Upward crossing
                cross = (x[i + 1] - x[i]) * (py - y[i]) - (px - x[i]) * (y[i + 1] - y[i])
                if cross > 0:
                    wn += 1
        else:
            if y[i + 1] <= py:
                # Downward crossing
                cross = (x[i + 1] - x[i]) * (py - y[i]) - (px - x[i]) * (y[i + 1] - y[i])
                if cross < 0:
                    wn -= 1
    return wn


def region_contains(paths: Sequence[Sequence[Sequence[float]]], point: tuple[float, float]) -> bool:
    """Containment in the region bounded by a set of oriented rings.

    Outer rings and holes wind in opposite directions, so the winding
    numbers sum to zero outside the region and inside holes.
    """
    return sum(winding_number(point, np.asarray(p, dtype=np.float64)) for p in paths) != 0


def total_signed_area(paths: Sequence[Sequence[Sequence[float]]]) -> float:
    return sum(signed_area(np.asarray(p, dtype=np.float64)) for p in paths)
