"""Tests for the shape registry."""

from dataclasses import fields

import pytest

from isoline.engine.registry import ShapeRegistry, ShapeSpec, get_registry
from isoline.engine.sides import Corner, Side


def test_register_and_get():
    reg = ShapeRegistry()
    spec = ShapeSpec(name="triangle_bl", edges=((Side.LB, Side.BL),), polygon=(Side.LB, Side.BL, Corner.BOTTOM_LEFT))
    reg.register(spec)
    assert reg.get("triangle_bl") is spec
    assert "triangle_bl" in reg
    assert reg.count == 1


def test_duplicate_name_rejected():
    reg = ShapeRegistry()
    reg.register(ShapeSpec(name="square", polygon=(Corner.BOTTOM_LEFT,)))
    with pytest.raises(ValueError, match="Duplicate shape name"):
        reg.register(ShapeSpec(name="square", polygon=(Corner.TOP_LEFT,)))


def test_all_sorted_by_vertex_count():
    reg = ShapeRegistry()
    big = ShapeSpec(name="a", polygon=(Side.BL, Side.LB, Side.LT, Side.TL))
    small = ShapeSpec(name="b", polygon=(Side.LB, Side.BL, Corner.BOTTOM_LEFT))
    reg.register(big)
    reg.register(small)
    assert [s.name for s in reg.all()] == ["b", "a"]


def test_module_registry_holds_full_table():
    import isoline.engine.shapes  # noqa: F401

    reg = get_registry()
    assert reg.count == 38
    assert reg.get("octagon").sides == set(Side)
    assert reg.get("square").edges == ()


def test_shape_is_pure_topology():
    assert [f.name for f in fields(ShapeSpec)] == ["name", "edges", "polygon"]
