"""Path tracer: stitch per-cell edges into global paths.

Every edge is consumed exactly once. A path that leaves the grid either ends
there (open isolines) or walks clockwise along the outer border until it
finds the next entry edge or arrives back at its own origin.
"""

from __future__ import annotations

import logging

from isoline.engine.context import CellGrid
from isoline.engine.sides import Point, border_exit, on_outer_border, skip_corner

logger = logging.getLogger(__name__)

Site = tuple[int, int, int]  # (x, y, slot)


class PathTracer:
    """Consumes the edges of one grid. Not reusable across grids."""

    # A rectangle has four sides; more turns means the walk is lost
    MAX_TURNS = 4

    def __init__(
        self,
        grid: CellGrid,
        *,
        linear_ring: bool = True,
        follow_border: bool = True,
    ) -> None:
        self.grid = grid
        self.scheme = grid.scheme
        self.linear_ring = linear_ring
        self.follow_border = follow_border
        self.consumed = 0
        self.abandoned = 0

    def trace(self) -> list[list[list[float]]]:
        paths: list[list[list[float]]] = []

        if not self.follow_border:
            # Open isolines are traced whole from where they enter the grid
            for x, y, slot in self._border_starts():
                cell = self.grid.cells[y][x]
                if cell is not None and cell.edges[slot] is not None:
                    paths.append(self._trace_from(x, y, slot))

        for y, row in enumerate(self.grid.cells):
            for x, cell in enumerate(row):
                if cell is None:
                    continue
                for slot in range(self.scheme.size):
                    if cell.edges[slot] is not None:
                        paths.append(self._trace_from(x, y, slot))

        logger.debug(
            "Traced %d %s paths from %d edges (%d abandoned)",
            len(paths),
            self.scheme.name,
            self.consumed,
            self.abandoned,
        )
        return paths

    def _border_starts(self) -> list[Site]:
        rows, cols = self.grid.rows, self.grid.cols
        starts: list[Site] = []
        for y, row in enumerate(self.grid.cells):
            for x, cell in enumerate(row):
                if cell is None:
                    continue
                for slot in range(self.scheme.size):
                    side = self.scheme.cardinal(slot)
                    if cell.edges[slot] is not None and on_outer_border(x, y, side, rows, cols):
                        starts.append((x, y, slot))
        return starts

    def _trace_from(self, x: int, y: int, slot: int) -> list[list[float]]:
        first = self.grid.cells[y][x].edges[slot]
        origin: Point = (x + first.entry[0], y + first.entry[1])
        origin_site: Site = (x, y, slot)
        path: list[Point] = [origin]

        while True:
            cell = self.grid.cell(x, y)
            # Absent cell or missing slot: the path cannot be extended
            edge = cell.take_edge(slot) if cell is not None else None
            if edge is None:
                break
            self.consumed += 1
            path.append((x + edge.exit[0], y + edge.exit[1]))

            x += edge.move.dx
            y += edge.move.dy
            slot = edge.move.enter

            if not self.grid.contains(x, y):
                if not self.follow_border:
                    break
                site = self._walk_border(x, y, path, origin_site)
                if site is None:
                    break
                x, y, slot = site

        if self.linear_ring:
            if path[-1] != origin:
                path.append(origin)
        elif len(path) > 2 and path[-1] == origin:
            path.pop()

        return [[float(px), float(py)] for px, py in path]

    def _walk_border(self, x: int, y: int, path: list[Point], origin_site: Site) -> Site | None:
        """Walk the border from just outside (x, y).

        Appends skipped grid corners (and the re-entry point) to ``path``.
        Returns the site to resume tracing from, or None once the path is
        closed or the walk has to be given up.
        """
        x, y, direction = border_exit(x, y, self.grid.rows, self.grid.cols)
        turns = 0

        while True:
            if turns > self.MAX_TURNS:
                self.abandoned += 1
                logger.warning(
                    "Border walk exceeded %d turns at cell (%d, %d); abandoning path",
                    self.MAX_TURNS,
                    x,
                    y,
                )
                return None

            cell = self.grid.cells[y][x]
            for slot in self.scheme.valid_entries[direction]:
                if (x, y, slot) == origin_site:
                    return None
                edge = cell.edges[slot] if cell is not None else None
                if edge is not None:
                    path.append((x + edge.entry[0], y + edge.entry[1]))
                    return (x, y, slot)

            path.append(skip_corner(x, y, direction))
            dx, dy = direction.step
            if self.grid.contains(x + dx, y + dy):
                x += dx
                y += dy
            else:
                direction = direction.rotated()
                turns += 1
