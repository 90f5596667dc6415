"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    shapes_registered: int = 0


class IsolineResponse(BaseModel):
    paths: list[list[list[float]]] = Field(default_factory=list)
    path_count: int = 0
    processing_time_ms: float = 0.0
    geometry: dict[str, Any] | None = None
