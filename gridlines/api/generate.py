"""POST /api/gridlines — add a gridline layer to an SVG."""

from __future__ import annotations

import dataclasses
import time

from fastapi import APIRouter, Depends, HTTPException

from gridlines.dependencies import get_grid_config
from gridlines.engine.config import GridConfig
from gridlines.errors import GridlinesError
from gridlines.generate import generate_gridlines
from gridlines.models.requests import GridlinesRequest
from gridlines.models.responses import GridLine, GridlinesResponse

router = APIRouter()


@router.post("/gridlines", response_model=GridlinesResponse)
async def gridlines(
    req: GridlinesRequest,
    base_config: GridConfig = Depends(get_grid_config),
) -> GridlinesResponse:
    start = time.perf_counter()

    overrides = {}
    if req.tolerance is not None:
        overrides["tolerance"] = req.tolerance
    if req.layer_name:
        overrides["layer_name"] = req.layer_name
    config = dataclasses.replace(base_config, **overrides)

    try:
        result = generate_gridlines(req.svg, req.selection, config)
    except GridlinesError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    ctx = result.context

    return GridlinesResponse(
        svg=result.svg,
        layer_id=result.layer_id,
        lines=[
            GridLine(x1=s.start.x, y1=s.start.y, x2=s.end.x, y2=s.end.y)
            for s in ctx.segments
        ],
        edges_processed=ctx.edges_processed,
        skipped=ctx.skipped,
        processing_time_ms=round(elapsed, 1),
    )
