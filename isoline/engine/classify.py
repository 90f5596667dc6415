"""Cell classification: four corner samples -> case code -> Cell record."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import ClassVar

from isoline.engine import shapes  # noqa: F401  (registers the shape table)
from isoline.engine.cases import band_code, band_shapes, contour_code, contour_shapes
from isoline.engine.context import Cell, Edge, Move
from isoline.engine.interpolation import (
    BandInterpolator,
    ContourInterpolator,
    band_linear,
    band_linear_a,
    band_linear_b,
    contour_linear,
)
from isoline.engine.registry import ShapeRegistry, Vertex, get_registry
from isoline.engine.sides import (
    BAND_SCHEME,
    CARDINAL_OF,
    CONTOUR_SCHEME,
    FIRST_CROSSING,
    SIDE_CORNERS,
    Corner,
    LabelScheme,
    Point,
    Side,
    side_point,
)

Corners = tuple[float, float, float, float]


class CellClassifier(ABC):
    """Base classifier; subclasses supply the case code and crossing rule."""

    scheme: ClassVar[LabelScheme]

    def __init__(
        self,
        *,
        edges: bool = True,
        polygons: bool = False,
        registry: ShapeRegistry | None = None,
    ) -> None:
        self.want_edges = edges
        self.want_polygons = polygons
        self.registry = registry or get_registry()

    @abstractmethod
    def case_code(self, corners: Corners) -> int:
        """Case code packed from the corner classes."""

    @abstractmethod
    def resolve(self, code: int, corners: Corners) -> tuple[str, ...]:
        """Shape names for ``code``; saddles consult the corner average."""

    @abstractmethod
    def crossing(self, side: Side, corners: Corners) -> float:
        """Fraction along ``side`` where the boundary crosses it."""

    def classify(self, corners: Corners) -> Cell | None:
        """Build the Cell for one set of corners; None if any corner is NaN."""
        if any(math.isnan(v) for v in corners):
            return None

        code = self.case_code(corners)
        cell = Cell(code=code, corners=corners, edges=[None] * self.scheme.size)

        points: dict[Side, Point] = {}

        def at(vertex: Vertex) -> Point:
            if isinstance(vertex, Corner):
                return vertex.value
            if vertex not in points:
                t = self.crossing(vertex, corners)
                points[vertex] = side_point(CARDINAL_OF[vertex], t)
            return points[vertex]

        for name in self.resolve(code, corners):
            spec = self.registry.get(name)
            if self.want_edges:
                for entry, exit_ in spec.edges:
                    dx, dy, enter = self.scheme.exit_move(exit_)
                    cell.edges[self.scheme.slot(entry)] = Edge(
                        path=(at(entry), at(exit_)),
                        move=Move(dx=dx, dy=dy, enter=enter),
                    )
            if self.want_polygons:
                cell.polygons.append([at(v) for v in spec.polygon])
        return cell


class ContourClassifier(CellClassifier):
    scheme = CONTOUR_SCHEME

    def __init__(
        self,
        threshold: float,
        *,
        interpolate: ContourInterpolator | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.threshold = threshold
        self.interpolate = interpolate or contour_linear

    def bit(self, value: float) -> int:
        return 1 if value >= self.threshold else 0

    def case_code(self, corners: Corners) -> int:
        return contour_code(*(self.bit(v) for v in corners))

    def resolve(self, code: int, corners: Corners) -> tuple[str, ...]:
        center = self.bit(sum(corners) / 4.0)
        return contour_shapes(code, center)

    def crossing(self, side: Side, corners: Corners) -> float:
        i, j = SIDE_CORNERS[CARDINAL_OF[side]]
        return self.interpolate(corners[i], corners[j], self.threshold)


class BandClassifier(CellClassifier):
    scheme = BAND_SCHEME

    def __init__(
        self,
        min_v: float,
        max_v: float,
        *,
        interpolate: BandInterpolator | None = None,
        interpolate_a: BandInterpolator | None = None,
        interpolate_b: BandInterpolator | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.min_v = min_v
        self.max_v = max_v
        self.interpolate = interpolate or band_linear
        self.interpolate_a = interpolate_a or band_linear_a
        self.interpolate_b = interpolate_b or band_linear_b

    def trit(self, value: float) -> int:
        if value < self.min_v:
            return 0
        if value > self.max_v:
            return 2
        return 1

    def case_code(self, corners: Corners) -> int:
        return band_code(*(self.trit(v) for v in corners))

    def resolve(self, code: int, corners: Corners) -> tuple[str, ...]:
        center = self.trit(sum(corners) / 4.0)
        return band_shapes(code, center)

    def crossing(self, side: Side, corners: Corners) -> float:
        i, j = SIDE_CORNERS[CARDINAL_OF[side]]
        a, b = corners[i], corners[j]
        # A side running from below the band to above it crosses twice
        if {self.trit(a), self.trit(b)} == {0, 2}:
            fn = self.interpolate_a if side in FIRST_CROSSING else self.interpolate_b
            return fn(a, b, self.min_v, self.max_v)
        return self.interpolate(a, b, self.min_v, self.max_v)
