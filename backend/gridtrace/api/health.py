"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from gridtrace import __version__
from gridtrace.models.responses import HealthResponse

router = APIRouter()

_STRATEGIES = ["path", "rect"]


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, strategies=_STRATEGIES)
