"""Frame detection: the whole outer ring of samples lies in the filled region."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from isoline.engine.context import CellGrid

logger = logging.getLogger(__name__)


def outer_ring(samples: NDArray[np.float64]) -> NDArray[np.float64]:
    """All samples on the grid's outer edge, each once."""
    return np.concatenate(
        [samples[0, :], samples[-1, :], samples[1:-1, 0], samples[1:-1, -1]]
    )


def requires_frame(grid: CellGrid) -> bool:
    if grid.rows < 1 or grid.cols < 1:
        return False
    return bool(np.all(grid.is_inside(outer_ring(grid.samples))))


def frame_path(rows: int, cols: int, linear_ring: bool = True) -> list[list[float]]:
    path = [[0.0, 0.0], [0.0, float(rows)], [float(cols), float(rows)], [float(cols), 0.0]]
    if linear_ring:
        path.append([0.0, 0.0])
    return path


def detect_frame(grid: CellGrid, linear_ring: bool = True) -> list[list[float]] | None:
    """Enclosing rectangle for a grid whose border is entirely inside, else None."""
    if not requires_frame(grid):
        return None
    logger.debug("Frame required for %dx%d grid", grid.rows, grid.cols)
    return frame_path(grid.rows, grid.cols, linear_ring)
