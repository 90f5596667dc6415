"""Tests for cell classification."""

import math

import pytest

from isoline.engine.classify import BandClassifier, CellClassifier, ContourClassifier
from isoline.engine.sides import Cardinal, Side


def test_contour_code_bits():
    clf = ContourClassifier(5.0)
    assert clf.case_code((0.0, 0.0, 0.0, 0.0)) == 0
    assert clf.case_code((5.0, 0.0, 0.0, 0.0)) == 1
    assert clf.case_code((0.0, 9.0, 0.0, 0.0)) == 2
    assert clf.case_code((0.0, 0.0, 9.0, 0.0)) == 4
    assert clf.case_code((0.0, 0.0, 0.0, 9.0)) == 8
    assert clf.case_code((9.0, 9.0, 9.0, 9.0)) == 15


def test_band_code_trits():
    clf = BandClassifier(4.0, 6.0)
    assert clf.case_code((0.0, 0.0, 0.0, 0.0)) == 0
    assert clf.case_code((5.0, 5.0, 5.0, 5.0)) == 85
    assert clf.case_code((9.0, 9.0, 9.0, 9.0)) == 170
    # limits are inclusive
    assert clf.case_code((4.0, 6.0, 0.0, 9.0)) == 1 | (1 << 2) | (0 << 4) | (2 << 6)


def test_nan_corner_gives_absent_cell():
    assert ContourClassifier(5.0).classify((0.0, math.nan, 0.0, 0.0)) is None
    assert BandClassifier(1.0, 2.0).classify((math.nan, 0.0, 0.0, 0.0)) is None


def test_empty_and_full_cells_have_no_edges():
    clf = ContourClassifier(5.0, polygons=True)
    empty = clf.classify((0.0, 0.0, 0.0, 0.0))
    full = clf.classify((9.0, 9.0, 9.0, 9.0))
    assert empty.edge_count == 0 and empty.polygons == []
    assert full.edge_count == 0
    assert full.polygons == [[(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)]]


def test_contour_triangle_edge():
    # only x2 (top-right) above
    cell = ContourClassifier(5.0).classify((0.0, 0.0, 10.0, 0.0))
    assert cell.code == 4
    edge = cell.edges[Cardinal.RIGHT]
    assert edge.path == ((1.0, 0.5), (0.5, 1.0))
    assert (edge.move.dx, edge.move.dy, edge.move.enter) == (0, 1, Cardinal.BOTTOM)
    assert cell.edge_count == 1


def test_edges_and_polygons_are_optional():
    corners = (0.0, 0.0, 10.0, 0.0)
    only_polys = ContourClassifier(5.0, edges=False, polygons=True).classify(corners)
    assert only_polys.edge_count == 0
    assert len(only_polys.polygons) == 1
    only_edges = ContourClassifier(5.0).classify(corners)
    assert only_edges.polygons == []


@pytest.mark.parametrize(
    "corners, expected",
    [
        ((10.0, 0.0, 10.0, 0.0), 2),  # center 5 < 6: two triangles
        ((10.0, 2.0, 10.0, 2.0), 1),  # center 6 >= 6: joined hexagon
    ],
)
def test_contour_saddle_uses_center_average(corners, expected):
    cell = ContourClassifier(6.0, polygons=True).classify(corners)
    assert cell.code == 5
    assert len(cell.polygons) == expected


@pytest.mark.parametrize(
    "corners, expected",
    [
        ((5.0, 0.0, 5.0, 0.0), 2),  # center below the band
        ((5.0, 3.0, 5.0, 3.0), 1),  # center within the band
        ((5.0, 9.0, 5.0, 9.0), 2),  # center above the band
    ],
)
def test_band_saddle_uses_center_average(corners, expected):
    cell = BandClassifier(4.0, 6.0, polygons=True).classify(corners)
    assert len(cell.polygons) == expected


def test_band_double_crossing_uses_both_limits():
    # x0 above, everything else below: strip around the bottom-left corner
    cell = BandClassifier(2.0, 6.0, polygons=True).classify((10.0, 0.0, 0.0, 0.0))
    assert cell.code == 2
    polygon = cell.polygons[0]
    # BL at the upper limit, LB at the upper limit, LT and BR at the lower one
    assert polygon == [(0.4, 0.0), (0.0, 0.4), (0.0, 0.8), (0.8, 0.0)]
    assert set(i for i, e in enumerate(cell.edges) if e is not None) == {Side.BL, Side.LT}


def test_custom_interpolators_are_used():
    calls = []

    def halfway(a, b, lo, hi):
        calls.append((a, b, lo, hi))
        return 0.5

    clf = BandClassifier(2.0, 6.0, interpolate_a=halfway, interpolate_b=halfway)
    cell = clf.classify((10.0, 0.0, 0.0, 0.0))
    assert cell.edges[Side.BL].path[0] == (0.5, 0.0)
    assert calls and all(c[2:] == (2.0, 6.0) for c in calls)


def test_base_classifier_requires_case_rules():
    with pytest.raises(TypeError):
        CellClassifier()
