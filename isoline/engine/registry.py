"""Shape registry: every local cell topology is a named, data-only variant.

Usage:
    shape(
        "triangle_bl",
        edges=[(Side.LB, Side.BL)],
        polygon=[Side.LB, Side.BL, Corner.BOTTOM_LEFT],
    )

Edges are directed entry -> exit pairs with the filled region on their
right; polygons run clockwise in the same frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from isoline.engine.sides import Corner, Side

logger = logging.getLogger(__name__)

Vertex = Side | Corner


@dataclass(frozen=True)
class ShapeSpec:
    name: str
    edges: tuple[tuple[Side, Side], ...] = ()
    polygon: tuple[Vertex, ...] = ()

    @property
    def sides(self) -> set[Side]:
        return {s for pair in self.edges for s in pair}


class ShapeRegistry:
    """Singleton registry of all cell shapes, keyed by name."""

    def __init__(self) -> None:
        self._shapes: dict[str, ShapeSpec] = {}

    def register(self, spec: ShapeSpec) -> None:
        if spec.name in self._shapes:
            raise ValueError(f"Duplicate shape name: {spec.name}")
        self._shapes[spec.name] = spec
        logger.debug(
            "Registered shape %s (%d edges, %d vertices)",
            spec.name,
            len(spec.edges),
            len(spec.polygon),
        )

    def get(self, name: str) -> ShapeSpec:
        return self._shapes[name]

    def __contains__(self, name: str) -> bool:
        return name in self._shapes

    def all(self) -> list[ShapeSpec]:
        return sorted(self._shapes.values(), key=lambda s: (len(s.polygon), s.name))

    @property
    def count(self) -> int:
        return len(self._shapes)


# Module-level singleton
_registry = ShapeRegistry()


def get_registry() -> ShapeRegistry:
    return _registry


def shape(
    name: str,
    *,
    edges: list[tuple[Side, Side]] | None = None,
    polygon: list[Vertex],
) -> ShapeSpec:
    """Register a shape on the module registry and return it."""
    spec = ShapeSpec(
        name=name,
        edges=tuple(edges or ()),
        polygon=tuple(polygon),
    )
    _registry.register(spec)
    return spec
