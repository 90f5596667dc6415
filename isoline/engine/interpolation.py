"""Linear crossing interpolation along a cell side.

Every function returns the fraction in [0, 1] measured from ``a`` towards
``b``. Callers may swap any of them for their own field reconstruction as
long as the signature is kept.
"""

from __future__ import annotations

from typing import Callable

ContourInterpolator = Callable[[float, float, float], float]
BandInterpolator = Callable[[float, float, float, float], float]


def contour_linear(a: float, b: float, threshold: float) -> float:
    if a < b:
        return (threshold - a) / (b - a)
    return (a - threshold) / (a - b)


def band_linear(a: float, b: float, min_v: float, max_v: float) -> float:
    """Single crossing: the band limit lying between ``a`` and ``b``."""
    if a < b:
        level = min_v if a < min_v else max_v
        return (level - a) / (b - a)
    level = max_v if a > max_v else min_v
    return (a - level) / (a - b)


def band_linear_a(a: float, b: float, min_v: float, max_v: float) -> float:
    """First of two crossings on a side spanning the whole band."""
    if a < b:
        return (min_v - a) / (b - a)
    return (a - max_v) / (a - b)


def band_linear_b(a: float, b: float, min_v: float, max_v: float) -> float:
    """Second of two crossings on a side spanning the whole band."""
    if a < b:
        return (max_v - a) / (b - a)
    return (a - min_v) / (a - b)
