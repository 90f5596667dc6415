"""POST /api/isocontours and /api/isobands."""

from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException

from isoline.config import Settings
from isoline.dependencies import get_settings
from isoline.engine.builder import InvalidGridError
from isoline.engine.config import IsoOptions
from isoline.engine.pipeline import Paths, Pipeline
from isoline.models.requests import GridRequest, IsoBandRequest, IsoContourRequest
from isoline.models.responses import IsolineResponse
from isoline.utils.export import to_geojson

logger = logging.getLogger(__name__)

router = APIRouter()


def _check_size(req: GridRequest, settings: Settings) -> None:
    samples = sum(len(row) for row in req.grid)
    if samples > settings.max_grid_cells:
        raise HTTPException(
            status_code=413,
            detail=f"Grid has {samples} samples; the limit is {settings.max_grid_cells}",
        )


def _run(req: GridRequest, extract: Callable[[Pipeline], Paths], closed: bool) -> IsolineResponse:
    start = time.perf_counter()
    pipeline = Pipeline(IsoOptions(polygons=req.polygons, linear_ring=req.linear_ring))
    try:
        paths = extract(pipeline)
    except InvalidGridError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    geometry = to_geojson(paths, closed=closed) if req.output == "geojson" else None
    elapsed = (time.perf_counter() - start) * 1000
    logger.debug("%d paths in %.1fms", len(paths), elapsed)

    return IsolineResponse(
        paths=paths,
        path_count=len(paths),
        processing_time_ms=round(elapsed, 3),
        geometry=geometry,
    )


@router.post("/isocontours", response_model=IsolineResponse)
async def isocontours(
    req: IsoContourRequest,
    settings: Settings = Depends(get_settings),
) -> IsolineResponse:
    _check_size(req, settings)
    # Open isolines only when rings are neither closed nor per-cell
    closed = req.linear_ring or req.polygons
    return _run(req, lambda p: p.contours(req.grid, req.threshold), closed)


@router.post("/isobands", response_model=IsolineResponse)
async def isobands(
    req: IsoBandRequest,
    settings: Settings = Depends(get_settings),
) -> IsolineResponse:
    _check_size(req, settings)
    return _run(req, lambda p: p.bands(req.grid, req.min_v, req.bandwidth), True)
