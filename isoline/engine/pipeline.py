"""Extraction pipeline: grid building, then tracing or cell-polygon output."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping, Sequence
from typing import Any

from numpy.typing import NDArray

from isoline.engine.builder import build_band_grid, build_contour_grid
from isoline.engine.config import IsoOptions, resolve_options
from isoline.engine.context import CellGrid
from isoline.engine.frame import detect_frame
from isoline.engine.polygons import emit_cell_polygons
from isoline.engine.registry import ShapeRegistry, get_registry
from isoline.engine.tracer import PathTracer

logger = logging.getLogger(__name__)

Grid = Sequence[Sequence[float | None]] | NDArray[Any]
Paths = list[list[list[float]]]


class Pipeline:
    """Runs one extraction per call; holds no per-grid state between calls."""

    def __init__(self, options: IsoOptions | None = None, registry: ShapeRegistry | None = None) -> None:
        self.options = options or IsoOptions()
        self.registry = registry or get_registry()

    def contours(self, grid: Grid, threshold: float) -> Paths:
        opts = self.options
        self._log(opts, "Computing isocontour for %s", threshold)
        start = time.perf_counter()

        cell_grid = build_contour_grid(
            grid,
            threshold,
            edges=not opts.polygons,
            polygons=opts.polygons,
            interpolate=opts.interpolate,
            registry=self.registry,
        )
        # Open isolines stop where they leave the grid
        result = self._extract(cell_grid, follow_border=opts.linear_ring)
        return self._finish(result, "isocontour", start)

    def bands(self, grid: Grid, min_v: float, bandwidth: float) -> Paths:
        opts = self.options
        self._log(opts, "Computing isobands for [%s:%s]", min_v, min_v + abs(bandwidth))
        start = time.perf_counter()

        cell_grid = build_band_grid(
            grid,
            min_v,
            bandwidth,
            edges=not opts.polygons,
            polygons=opts.polygons,
            interpolate=opts.interpolate,
            interpolate_a=opts.interpolate_a,
            interpolate_b=opts.interpolate_b,
            registry=self.registry,
        )
        result = self._extract(cell_grid, follow_border=True)
        return self._finish(result, "isoband", start)

    def _extract(self, cell_grid: CellGrid, follow_border: bool) -> Paths:
        opts = self.options
        if opts.polygons:
            self._log(opts, "Returning single polygons for each grid cell")
            return emit_cell_polygons(cell_grid, opts.linear_ring)

        self._log(opts, "Returning paths for the entire %dx%d grid", cell_grid.rows, cell_grid.cols)
        paths: Paths = []
        frame = detect_frame(cell_grid, opts.linear_ring)
        if frame is not None:
            paths.append(frame)
        tracer = PathTracer(cell_grid, linear_ring=opts.linear_ring, follow_border=follow_border)
        paths.extend(tracer.trace())
        return paths

    def _finish(self, result: Paths, kind: str, start: float) -> Paths:
        total = (time.perf_counter() - start) * 1000
        self._log(self.options, "Pipeline complete: %d %s rings in %.1fms", len(result), kind, total)
        if self.options.success_callback is not None:
            self.options.success_callback(result)
        return result

    @staticmethod
    def _log(opts: IsoOptions, msg: str, *args: Any) -> None:
        logger.log(logging.INFO if opts.verbose else logging.DEBUG, msg, *args)


def iso_contours(
    grid: Grid,
    threshold: float,
    options: IsoOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Paths:
    """Isolines of ``grid`` at ``threshold``.

    Paths run clockwise around the region at or above the threshold, in
    grid-cell units (x = column, y = row). With ``polygons=True`` the
    per-cell polygons are returned instead.
    """
    return Pipeline(resolve_options(options, **overrides)).contours(grid, threshold)


def iso_bands(
    grid: Grid,
    min_v: float,
    bandwidth: float,
    options: IsoOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Paths:
    """Isobands of ``grid`` covering ``[min_v, min_v + |bandwidth|]``.

    Outer rings run clockwise, holes counter-clockwise.
    """
    return Pipeline(resolve_options(options, **overrides)).bands(grid, min_v, bandwidth)
