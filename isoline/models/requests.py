"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

OutputFormat = Literal["paths", "geojson"]


class GridRequest(BaseModel):
    grid: list[list[float | None]] = Field(
        ...,
        description="Row-major samples; null marks missing data",
    )
    polygons: bool = Field(default=False, description="Return per-cell polygons instead of traced paths")
    linear_ring: bool = Field(default=True, description="Repeat the first point at the end of each ring")
    output: OutputFormat = Field(default="paths", description="Also return a GeoJSON geometry when 'geojson'")


class IsoContourRequest(GridRequest):
    threshold: float = Field(..., description="Contour level")


class IsoBandRequest(GridRequest):
    min_v: float = Field(..., description="Lower band limit")
    bandwidth: float = Field(..., description="Band width; the sign is ignored")
