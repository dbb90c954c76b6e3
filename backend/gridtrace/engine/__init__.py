"""GridTrace render engine."""

from gridtrace.engine.config import RenderOptions
from gridtrace.engine.edge_index import Direction, Edge, EdgeIndex
from gridtrace.engine.edges import extract_edges
from gridtrace.engine.encoder import encode_loop, loops_to_path_data
from gridtrace.engine.grid import GridAccessor, MatrixGrid, grid_module_count
from gridtrace.engine.pipeline import RenderResult, render, render_svg
from gridtrace.engine.tracer import TracerInvariantError, trace_loops

__all__ = [
    "RenderOptions",
    "Direction",
    "Edge",
    "EdgeIndex",
    "extract_edges",
    "encode_loop",
    "loops_to_path_data",
    "GridAccessor",
    "MatrixGrid",
    "grid_module_count",
    "RenderResult",
    "render",
    "render_svg",
    "TracerInvariantError",
    "trace_loops",
]
