"""Whole-grid properties of traced paths on a smooth field."""

import numpy as np
import pytest

from isoline import iso_bands, iso_contours
from isoline.engine.builder import build_band_grid, build_contour_grid
from isoline.engine.tracer import PathTracer
from isoline.utils.geometry import region_contains, total_signed_area
from tests.conftest import gaussian_field

FIELD = gaussian_field()
ROWS, COLS = FIELD.shape[0] - 1, FIELD.shape[1] - 1

CONTOUR_LEVELS = [-0.2, 0.1, 0.37, 0.6]
BANDS = [(0.1, 0.2), (-0.2, 0.7), (0.3, 5.0)]


def _probe_points() -> list[tuple[float, float]]:
    # Off-lattice offsets keep probes away from cell sides and crossings
    return [(x + 0.37, y + 0.61) for y in range(ROWS) for x in range(COLS)] + [
        (x + 0.83, y + 0.19) for y in range(ROWS) for x in range(COLS)
    ]


@pytest.mark.parametrize("level", CONTOUR_LEVELS)
def test_contour_edges_consumed_exactly_once(level):
    grid = build_contour_grid(FIELD, level)
    created = grid.edge_count()
    tracer = PathTracer(grid)
    tracer.trace()
    assert created > 0
    assert tracer.consumed == created
    assert grid.edge_count() == 0
    assert tracer.abandoned == 0


@pytest.mark.parametrize("min_v, width", BANDS)
def test_band_edges_consumed_exactly_once(min_v, width):
    grid = build_band_grid(FIELD, min_v, width)
    created = grid.edge_count()
    tracer = PathTracer(grid)
    tracer.trace()
    assert tracer.consumed == created
    assert grid.edge_count() == 0
    assert tracer.abandoned == 0


@pytest.mark.parametrize("level", CONTOUR_LEVELS)
def test_paths_are_closed(level):
    for path in iso_contours(FIELD, level):
        assert path[0] == path[-1]
        assert all(0 <= x <= COLS and 0 <= y <= ROWS for x, y in path)


def test_threshold_outside_value_range():
    assert iso_contours(FIELD, float(FIELD.max()) + 1.0) == []
    below = iso_contours(FIELD, float(FIELD.min()) - 1.0)
    # Only the synthetic frame; no cell contributes a path
    assert below == [[[0.0, 0.0], [0.0, ROWS], [COLS, ROWS], [COLS, 0.0], [0.0, 0.0]]]


@pytest.mark.parametrize("level", CONTOUR_LEVELS)
def test_contour_paths_cover_cell_polygons(level):
    paths = iso_contours(FIELD, level)
    cells = iso_contours(FIELD, level, polygons=True)
    assert total_signed_area(paths) == pytest.approx(total_signed_area(cells), abs=1e-9)
    for pt in _probe_points():
        assert region_contains(paths, pt) == region_contains(cells, pt), pt


@pytest.mark.parametrize("min_v, width", BANDS)
def test_band_paths_cover_cell_polygons(min_v, width):
    paths = iso_bands(FIELD, min_v, width)
    cells = iso_bands(FIELD, min_v, width, polygons=True)
    assert total_signed_area(paths) == pytest.approx(total_signed_area(cells), abs=1e-9)
    for pt in _probe_points():
        assert region_contains(paths, pt) == region_contains(cells, pt), pt


def test_band_is_difference_of_contours():
    lo, hi = 0.1, 0.37
    band = total_signed_area(iso_bands(FIELD, lo, hi - lo))
    outer = total_signed_area(iso_contours(FIELD, lo))
    inner = total_signed_area(iso_contours(FIELD, hi))
    assert band == pytest.approx(outer - inner, abs=1e-9)


@pytest.mark.parametrize("level", [0.1, 0.37])
def test_zero_width_band_matches_contour_vertices(level):
    band = {tuple(p) for path in iso_bands(FIELD, level, 0.0) for p in path}
    contour = {tuple(p) for path in iso_contours(FIELD, level) for p in path}
    corners = {p for p in contour if float(p[0]).is_integer() and float(p[1]).is_integer()}
    assert band == contour - corners
    assert total_signed_area(iso_bands(FIELD, level, 0.0)) == pytest.approx(0.0, abs=1e-9)


def test_open_isolines_end_on_the_border():
    def on_border(p):
        return p[0] in (0.0, COLS) or p[1] in (0.0, ROWS)

    paths = iso_contours(FIELD, 0.1, linear_ring=False)
    assert paths
    for path in paths:
        if on_border(path[0]):
            assert on_border(path[-1])
        else:
            assert path[0] != path[-1]


def test_nan_hole_keeps_tracing_finite():
    data = np.array(FIELD)
    data[3, 4] = np.nan
    paths = iso_contours(data, 0.37)
    grid = build_contour_grid(data, 0.37)
    assert sum(1 for row in grid.cells for c in row if c is None) == 4
    assert all(len(p) >= 2 for p in paths)
