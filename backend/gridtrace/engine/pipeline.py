"""Render orchestrator — picks a strategy and hands its primitives to the assembler."""

from __future__ import annotations

import dataclasses
import logging
import time
from dataclasses import dataclass
from typing import Any

from gridtrace.engine.config import RenderOptions
from gridtrace.engine.grid import GridAccessor, grid_module_count
from gridtrace.engine.path_renderer import render_path
from gridtrace.engine.rect_renderer import render_rects
from gridtrace.svg.serializer import assemble_svg, canvas_dimension

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    svg: str
    strategy: str
    module_count: int
    dimension: int
    primitive_count: int = 0
    edge_count: int = 0
    loop_count: int = 0
    elapsed_ms: float = 0.0


def render(grid: GridAccessor, options: RenderOptions | None = None) -> RenderResult:
    """Render ``grid`` to SVG and report what the chosen strategy produced."""
    options = options or RenderOptions()
    start = time.perf_counter()

    n = grid_module_count(grid)
    module_size = options.resolved_module_size
    dimension = canvas_dimension(n, module_size, options.offset)

    edge_count = 0
    loop_count = 0
    if options.use_path:
        traced = render_path(grid, module_size, options.offset, options.color)
        primitives = traced.primitives
        edge_count = traced.edge_count
        loop_count = traced.loop_count
        primitive_count = len(primitives)
    else:
        primitives = render_rects(grid, module_size, options.offset, options.color)
        primitive_count = sum(line.count("<rect") for line in primitives)

    svg = assemble_svg(
        primitives,
        dimension,
        shape_rendering=options.shape_rendering,
        fill=options.fill,
        standalone=options.standalone,
    )

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Rendered %dx%d grid with %s strategy: %d primitives, %d loops in %.1fms",
        n,
        n,
        options.strategy,
        primitive_count,
        loop_count,
        elapsed,
    )
    return RenderResult(
        svg=svg,
        strategy=options.strategy,
        module_count=n,
        dimension=dimension,
        primitive_count=primitive_count,
        edge_count=edge_count,
        loop_count=loop_count,
        elapsed_ms=round(elapsed, 3),
    )


def render_svg(
    grid: GridAccessor,
    options: RenderOptions | None = None,
    **overrides: Any,
) -> str:
    """Render ``grid`` to an SVG string.

    Keyword overrides are applied on top of ``options``::

        render_svg(grid, use_path=True, offset=4, fill="ffffff")
    """
    options = options or RenderOptions()
    if overrides:
        options = dataclasses.replace(options, **overrides)
    return render(grid, options).svg
