"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from gridtrace.api import health, render

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(render.router)
