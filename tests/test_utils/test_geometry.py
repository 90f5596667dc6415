"""Tests for ring geometry helpers."""

import numpy as np
import pytest

import isoline.utils.geometry as geometry
from isoline.utils.geometry import (
    as_ring,
    region_contains,
    signed_area,
    total_signed_area,
    winding_number,
)

CW_SQUARE = [[0.0, 0.0], [0.0, 2.0], [2.0, 2.0], [2.0, 0.0], [0.0, 0.0]]
CCW_HOLE = [[0.5, 0.5], [1.5, 0.5], [1.5, 1.5], [0.5, 1.5], [0.5, 0.5]]


def test_as_ring_closes_open_paths():
    ring = as_ring([[0, 0], [0, 1], [1, 1]])
    assert ring.shape == (4, 2)
    assert np.array_equal(ring[0], ring[-1])
    assert as_ring(CW_SQUARE).shape == (5, 2)


def test_signed_area_orientation():
    assert signed_area(np.array(CW_SQUARE)) == pytest.approx(-4.0)
    assert signed_area(np.array(CCW_HOLE)) == pytest.approx(1.0)
    assert signed_area(np.array([[0, 0], [1, 1], [0, 0]], dtype=float)) == 0.0


def test_winding_number_sign_follows_orientation():
    assert winding_number((1.0, 1.0), np.array(CW_SQUARE)) == -1
    assert winding_number((1.0, 1.0), np.array(CCW_HOLE)) == 1
    assert winding_number((3.0, 1.0), np.array(CW_SQUARE)) == 0
    assert winding_number((1.0, 0.25), np.array(CW_SQUARE)) == -1


def test_region_contains_respects_holes():
    paths = [CW_SQUARE, CCW_HOLE]
    assert region_contains(paths, (0.25, 0.25))
    assert not region_contains(paths, (1.0, 1.0))
    assert not region_contains(paths, (5.0, 5.0))
    assert total_signed_area(paths) == pytest.approx(-3.0)


def test_only_ring_helpers_are_exported():
    public = {name for name in vars(geometry) if not name.startswith("_") and callable(getattr(geometry, name))}
    assert {"winding_direction", "bbox", "point_in_polygon"}.isdisjoint(public)
