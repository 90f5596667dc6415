"""Cell grids: the mutable state owned by a single extraction call.

Per-cell results -> Cell.edges / Cell.polygons
Grid-wide metadata -> CellGrid.* (rows, cols, limits, samples)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np
from numpy.typing import NDArray

from isoline.engine.sides import BAND_SCHEME, CONTOUR_SCHEME, LabelScheme, Point


@dataclass(frozen=True)
class Move:
    """Where a path continues after leaving a cell."""

    dx: int
    dy: int
    # Slot of the neighboring cell the path enters through
    enter: int


@dataclass(frozen=True)
class Edge:
    """One directed boundary segment crossing a cell."""

    # (entry, exit) in unit-cell coordinates
    path: tuple[Point, Point]
    move: Move

    @property
    def entry(self) -> Point:
        return self.path[0]

    @property
    def exit(self) -> Point:
        return self.path[1]


@dataclass
class Cell:
    """Classified unit cell. Absent cells (NaN corners) are stored as None."""

    code: int
    # Corner samples x0 (bottom-left), x1, x2, x3 (top-left)
    corners: tuple[float, float, float, float]
    # Fixed-size slots keyed by entry side; None = no edge or already consumed
    edges: list[Edge | None] = field(default_factory=list)
    # Local polygons in unit-cell coordinates
    polygons: list[list[Point]] = field(default_factory=list)

    def take_edge(self, slot: int) -> Edge | None:
        """Consume the edge entering through ``slot``."""
        edge = self.edges[slot]
        self.edges[slot] = None
        return edge

    @property
    def edge_count(self) -> int:
        return sum(1 for e in self.edges if e is not None)


@dataclass
class CellGrid(ABC):
    """Row-major array of cells with ``rows x cols`` entries."""

    scheme: ClassVar[LabelScheme]

    rows: int
    cols: int
    # Raw samples, shape (rows + 1, cols + 1)
    samples: NDArray[np.float64]
    cells: list[list[Cell | None]] = field(default_factory=list)

    def cell(self, x: int, y: int) -> Cell | None:
        """Cell in column ``x``, row ``y``; None if absent or off-grid."""
        if not self.contains(x, y):
            return None
        return self.cells[y][x]

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def edge_count(self) -> int:
        return sum(c.edge_count for row in self.cells for c in row if c is not None)

    @abstractmethod
    def is_inside(self, values: NDArray[np.float64]) -> NDArray[np.bool_]:
        """Element-wise membership of ``values`` in the filled region."""


@dataclass
class ContourGrid(CellGrid):
    scheme: ClassVar[LabelScheme] = CONTOUR_SCHEME

    threshold: float = 0.0

    def is_inside(self, values: NDArray[np.float64]) -> NDArray[np.bool_]:
        return values >= self.threshold


@dataclass
class BandGrid(CellGrid):
    scheme: ClassVar[LabelScheme] = BAND_SCHEME

    min_v: float = 0.0
    max_v: float = 0.0

    def is_inside(self, values: NDArray[np.float64]) -> NDArray[np.bool_]:
        return (values >= self.min_v) & (values <= self.max_v)
