"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    strategies: list[str] = Field(default_factory=list)


class RenderResponse(BaseModel):
    svg: str
    strategy: str
    module_count: int
    dimension: int
    primitive_count: int = 0
    edge_count: int = 0
    loop_count: int = 0
    processing_time_ms: float = 0.0
