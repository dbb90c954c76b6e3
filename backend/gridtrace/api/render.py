"""POST /api/render — module grid to SVG."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException

from gridtrace.config import Settings
from gridtrace.dependencies import get_settings
from gridtrace.engine.grid import MatrixGrid
from gridtrace.engine.pipeline import render
from gridtrace.models.requests import RenderRequest
from gridtrace.models.responses import RenderResponse

router = APIRouter()


# Plain def: rendering is CPU-bound, FastAPI runs it in its threadpool.
@router.post("/render", response_model=RenderResponse)
def render_grid(
    req: RenderRequest,
    settings: Settings = Depends(get_settings),
) -> RenderResponse:
    start = time.perf_counter()

    if len(req.matrix) > settings.max_module_count:
        raise HTTPException(
            status_code=422,
            detail=f"Grid has {len(req.matrix)} rows, limit is {settings.max_module_count}",
        )
    try:
        grid = MatrixGrid(req.matrix)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    result = render(grid, req.options.to_options())

    elapsed = (time.perf_counter() - start) * 1000
    return RenderResponse(
        svg=result.svg,
        strategy=result.strategy,
        module_count=result.module_count,
        dimension=result.dimension,
        primitive_count=result.primitive_count,
        edge_count=result.edge_count,
        loop_count=result.loop_count,
        processing_time_ms=round(elapsed, 1),
    )
