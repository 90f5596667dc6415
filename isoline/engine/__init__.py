"""Marching-squares engine: cell classification, shape table and path tracing."""

from isoline.engine.registry import shape, get_registry
from isoline.engine.config import IsoOptions
from isoline.engine.context import BandGrid, Cell, ContourGrid
from isoline.engine.pipeline import Pipeline, iso_bands, iso_contours

__all__ = [
    "shape",
    "get_registry",
    "IsoOptions",
    "BandGrid",
    "Cell",
    "ContourGrid",
    "Pipeline",
    "iso_bands",
    "iso_contours",
]
