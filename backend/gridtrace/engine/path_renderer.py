"""Trace the grid's contours into one compound ``<path>``."""

from __future__ import annotations

from dataclasses import dataclass, field

from gridtrace.engine.edge_index import Loop
from gridtrace.engine.edges import extract_edges
from gridtrace.engine.encoder import loops_to_path_data
from gridtrace.engine.grid import GridAccessor
from gridtrace.engine.tracer import trace_loops


@dataclass
class PathRender:
    """Traced loops plus the serialized primitive (empty list for an all-light grid)."""

    loops: list[Loop] = field(default_factory=list)
    path_data: str = ""
    primitives: list[str] = field(default_factory=list)
    edge_count: int = 0

    @property
    def loop_count(self) -> int:
        return len(self.loops)


def render_path(
    grid: GridAccessor,
    module_size: int,
    offset: int,
    color: str,
) -> PathRender:
    index = extract_edges(grid)
    edge_count = len(index)
    loops = trace_loops(index)
    path_data = loops_to_path_data(loops)

    primitives: list[str] = []
    if path_data:
        primitives.append(
            f'<path d="{path_data}" style="fill:#{color}" '
            f'transform="translate({offset},{offset}) scale({module_size})"/>'
        )

    return PathRender(
        loops=loops,
        path_data=path_data,
        primitives=primitives,
        edge_count=edge_count,
    )
