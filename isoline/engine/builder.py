"""Grid builder: classify every cell of a sample grid."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from isoline.engine.classify import BandClassifier, CellClassifier, ContourClassifier
from isoline.engine.context import BandGrid, Cell, ContourGrid

logger = logging.getLogger(__name__)


class InvalidGridError(ValueError):
    """Raised when the input cannot be read as a rectangular numeric grid."""


def as_samples(grid: Sequence[Sequence[float | None]] | NDArray[Any]) -> NDArray[np.float64]:
    """Coerce input to a 2-D float64 array; None entries become NaN."""
    try:
        samples = np.asarray(grid, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidGridError(f"Grid is not a rectangular numeric matrix: {e}") from e
    if samples.ndim != 2:
        raise InvalidGridError(f"Grid must be 2-dimensional, got {samples.ndim} dimension(s)")
    return samples


def classify_cells(samples: NDArray[np.float64], classifier: CellClassifier) -> list[list[Cell | None]]:
    """Row-major cells; corners are (i,j), (i+1,j), (i+1,j+1), (i,j+1)."""
    rows, cols = samples.shape[0] - 1, samples.shape[1] - 1
    values = samples.tolist()
    cells: list[list[Cell | None]] = []
    for j in range(rows):
        lower, upper = values[j], values[j + 1]
        cells.append(
            [
                classifier.classify((lower[i], lower[i + 1], upper[i + 1], upper[i]))
                for i in range(cols)
            ]
        )
    return cells


def _dimensions(samples: NDArray[np.float64]) -> tuple[int, int]:
    rows, cols = samples.shape[0] - 1, samples.shape[1] - 1
    if rows < 1 or cols < 1:
        return 0, 0
    return rows, cols


def build_contour_grid(
    grid: Sequence[Sequence[float | None]] | NDArray[Any],
    threshold: float,
    **classifier_kwargs: Any,
) -> ContourGrid:
    samples = as_samples(grid)
    rows, cols = _dimensions(samples)
    classifier = ContourClassifier(threshold, **classifier_kwargs)
    cells = classify_cells(samples, classifier) if rows else []
    absent = sum(1 for row in cells for c in row if c is None)
    if absent:
        logger.debug("Contour grid: %d of %d cells absent (missing data)", absent, rows * cols)
    return ContourGrid(rows=rows, cols=cols, samples=samples, cells=cells, threshold=threshold)


def build_band_grid(
    grid: Sequence[Sequence[float | None]] | NDArray[Any],
    min_v: float,
    bandwidth: float,
    **classifier_kwargs: Any,
) -> BandGrid:
    samples = as_samples(grid)
    rows, cols = _dimensions(samples)
    max_v = min_v + abs(bandwidth)
    classifier = BandClassifier(min_v, max_v, **classifier_kwargs)
    cells = classify_cells(samples, classifier) if rows else []
    absent = sum(1 for row in cells for c in row if c is None)
    if absent:
        logger.debug("Band grid: %d of %d cells absent (missing data)", absent, rows * cols)
    return BandGrid(rows=rows, cols=cols, samples=samples, cells=cells, min_v=min_v, max_v=max_v)
