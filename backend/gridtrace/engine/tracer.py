"""Loop tracer — partitions the boundary edges into closed loops."""

from __future__ import annotations

import logging

from gridtrace.engine.edge_index import Edge, EdgeIndex, Loop

logger = logging.getLogger(__name__)


class TracerInvariantError(RuntimeError):
    """Raised when a loop cannot close: the edge set was unbalanced."""


def trace_loops(index: EdgeIndex) -> list[Loop]:
    """Consume every edge in ``index``, returning loops in discovery order.

    Each step follows the oldest edge leaving the current end vertex. Where
    regions touch at a corner a vertex holds two outgoing edges; the walk may
    then pass through its own start vertex and come back later, giving a loop
    that touches itself at one point without crossing.

    The index is emptied in the process.
    """
    total = len(index)
    loops: list[Loop] = []

    while index:
        edge: Edge | None = index.first_edge()
        if edge is None:
            raise TracerInvariantError(f"{len(index)} edges counted but no bucket holds one")

        loop: Loop = []
        while edge is not None:
            loop.append(edge)
            index.remove(edge)
            edge = index.first_at(*edge.end)

        start, end = loop[0].start, loop[-1].end
        if start != end:
            raise TracerInvariantError(
                f"Loop starting at {start} ran out of edges at {end} "
                f"after {len(loop)} edges"
            )
        loops.append(loop)

    logger.debug("Traced %d edges into %d loops", total, len(loops))
    return loops
