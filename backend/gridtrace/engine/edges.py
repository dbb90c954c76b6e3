"""Boundary edge extraction.

The grid is padded with one ring of light cells so modules on the outer rim
still get their boundary. Every pair of neighbouring cells that differ in
darkness yields one unit edge, oriented with the dark cell on the right of the
direction of travel (screen space, y down). Outer boundaries therefore run
clockwise and holes counter-clockwise, which is what lets one filled path
carve holes under both the nonzero and even-odd fill rules.
"""

from __future__ import annotations

import logging

import numpy as np

from gridtrace.engine.edge_index import Direction, Edge, EdgeIndex
from gridtrace.engine.grid import GridAccessor, grid_module_count, module_array

logger = logging.getLogger(__name__)


def extract_edges(grid: GridAccessor) -> EdgeIndex:
    """Build the edge index for all dark/light boundaries of ``grid``.

    Insertion order: line ``y`` top to bottom; per ``y`` the horizontal edges
    on that line left to right, then the vertical edges of grid row ``y``.
    """
    n = grid_module_count(grid)
    cells = np.pad(module_array(grid), 1, mode="constant", constant_values=False)
    index = EdgeIndex(n)

    for y in range(n + 1):
        # Horizontal edges on line y, between padded rows y and y + 1.
        upper = cells[y, 1:-1]
        lower = cells[y + 1, 1:-1]
        for x in np.flatnonzero(upper != lower):
            x = int(x)
            if upper[x]:
                index.add(Edge(x + 1, y, Direction.LEFT))
            else:
                index.add(Edge(x, y, Direction.RIGHT))

        if y == n:
            break

        # Vertical edges of grid row y, between padded columns x and x + 1.
        row = cells[y + 1]
        left = row[:-1]
        right = row[1:]
        for x in np.flatnonzero(left != right):
            x = int(x)
            if left[x]:
                index.add(Edge(x, y, Direction.DOWN))
            else:
                index.add(Edge(x, y + 1, Direction.UP))

    logger.debug("Extracted %d boundary edges from %dx%d grid", len(index), n, n)
    return index
