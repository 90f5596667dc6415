"""Cell-polygon emitter: per-cell polygons in grid coordinates, no stitching."""

from __future__ import annotations

import logging

from isoline.engine.context import CellGrid

logger = logging.getLogger(__name__)


def emit_cell_polygons(grid: CellGrid, linear_ring: bool = True) -> list[list[list[float]]]:
    polygons: list[list[list[float]]] = []
    for y, row in enumerate(grid.cells):
        for x, cell in enumerate(row):
            if cell is None:
                continue
            for local in cell.polygons:
                ring = [[x + px, y + py] for px, py in local]
                if linear_ring and ring:
                    ring.append(list(ring[0]))
                polygons.append(ring)
    logger.debug("Emitted %d cell polygons", len(polygons))
    return polygons
