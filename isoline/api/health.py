"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from isoline import __version__
from isoline.engine.registry import get_registry
from isoline.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        shapes_registered=get_registry().count,
    )
