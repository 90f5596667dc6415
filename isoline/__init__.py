"""Isolines and isobands from rectangular sample grids."""

from isoline.engine import IsoOptions, iso_bands, iso_contours

__version__ = "0.1.0"

__all__ = ["IsoOptions", "iso_bands", "iso_contours", "__version__"]
