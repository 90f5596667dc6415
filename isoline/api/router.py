"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from isoline.api import health, isolines

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(isolines.router)
