"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from gridtrace.engine.config import RenderOptions


class RenderOptionsModel(BaseModel):
    offset: int = Field(default=0, description="Padding around the grid in pixels")
    fill: str | None = Field(default=None, description="Background color, e.g. 'ffffff'")
    color: str = Field(default="000", description="Module color")
    module_size: int | None = Field(
        default=None,
        gt=0,
        description="Pixel size of one module (default 11 for rect, 10 for path)",
    )
    shape_rendering: str = Field(default="crispEdges", description="SVG shape-rendering hint")
    standalone: bool = Field(default=True, description="Full SVG document vs embeddable fragment")
    use_path: bool = Field(default=False, description="Trace contours into one path")

    def to_options(self) -> RenderOptions:
        return RenderOptions(**self.model_dump())


class RenderRequest(BaseModel):
    matrix: list[list[bool]] = Field(..., description="Square module grid, True = dark")
    options: RenderOptionsModel = Field(default_factory=RenderOptionsModel)
