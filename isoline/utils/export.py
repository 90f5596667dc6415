"""Shapely assembly of traced rings into polygons and GeoJSON."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np
from shapely.geometry import LinearRing, MultiLineString, MultiPolygon, Polygon, mapping

from isoline.utils.geometry import as_ring, signed_area

logger = logging.getLogger(__name__)

Paths = Sequence[Sequence[Sequence[float]]]


def assemble_polygons(paths: Paths) -> MultiPolygon:
    """Group oriented rings into polygons with holes.

    Clockwise rings are outer shells; counter-clockwise rings are holes and
    go to the smallest shell covering them. Rings with no area are skipped.
    """
    shells: list[tuple[LinearRing, list[LinearRing]]] = []
    holes: list[LinearRing] = []

    for path in paths:
        ring = as_ring(path)
        if len(ring) < 4:
            continue
        area = signed_area(ring)
        if area == 0.0:
            continue
        if area < 0:
            shells.append((LinearRing(ring), []))
        else:
            holes.append(LinearRing(ring))

    shell_polys = [Polygon(shell) for shell, _ in shells]
    order = sorted(range(len(shells)), key=lambda i: shell_polys[i].area)
    orphans = 0
    for hole in holes:
        hole_poly = Polygon(hole)
        for i in order:
            if shell_polys[i].covers(hole_poly):
                shells[i][1].append(hole)
                break
        else:
            orphans += 1

    if orphans:
        logger.debug("Dropped %d holes with no enclosing shell", orphans)
    return MultiPolygon([Polygon(shell, inner) for shell, inner in shells])


def assemble_lines(paths: Paths) -> MultiLineString:
    lines = [np.asarray(p, dtype=np.float64) for p in paths if len(p) >= 2]
    return MultiLineString(lines)


def to_geometry(paths: Paths, closed: bool = True) -> MultiPolygon | MultiLineString:
    return assemble_polygons(paths) if closed else assemble_lines(paths)


def to_geojson(paths: Paths, closed: bool = True) -> dict[str, Any]:
    """GeoJSON geometry mapping for a list of paths."""
    return dict(mapping(to_geometry(paths, closed)))
