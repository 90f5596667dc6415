"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest


# 3x3 samples, single peak in the middle
PEAK_GRID = [
    [0.0, 0.0, 0.0],
    [0.0, 10.0, 0.0],
    [0.0, 0.0, 0.0],
]

UNIFORM_GRID = [
    [7.0, 7.0, 7.0],
    [7.0, 7.0, 7.0],
    [7.0, 7.0, 7.0],
]

# Values rise with the column index
RAMP_GRID = [
    [0.0, 1.0, 2.0],
    [0.0, 1.0, 2.0],
    [0.0, 1.0, 2.0],
]

# One cell, high corners on the x0-x2 diagonal
SADDLE_GRID = [
    [10.0, 0.0],
    [0.0, 10.0],
]


def gaussian_field(rows: int = 8, cols: int = 9) -> np.ndarray:
    """Two bumps and a dip; touches the border on several sides."""
    y, x = np.mgrid[0:rows, 0:cols].astype(np.float64)
    return (
        np.exp(-((x - 2.0) ** 2 + (y - 3.0) ** 2) / 4.0)
        + 0.8 * np.exp(-((x - 6.0) ** 2 + (y - 2.0) ** 2) / 3.0)
        - 0.5 * np.exp(-((x - 5.0) ** 2 + (y - 6.0) ** 2) / 2.0)
    )


@pytest.fixture
def peak_grid() -> list[list[float]]:
    return [row[:] for row in PEAK_GRID]


@pytest.fixture
def field() -> np.ndarray:
    return gaussian_field()
