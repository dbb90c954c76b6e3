"""Leaf-node geometry helpers for traced loops. No engine imports beyond the edge model."""

from __future__ import annotations

from functools import reduce

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon, box
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from gridtrace.engine.edge_index import Loop

Vertex = tuple[int, int]


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area of a closed point sequence.

    In SVG screen space (y down) positive = clockwise on screen.
    """
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def loop_vertices(loop: Loop) -> list[Vertex]:
    """Start vertex of every edge, in order. The closing vertex is not repeated."""
    return [edge.start for edge in loop]


def loop_points(loop: Loop) -> NDArray[np.float64]:
    return np.array(loop_vertices(loop), dtype=np.float64).reshape(-1, 2)


def loop_signed_area(loop: Loop) -> float:
    return signed_area(loop_points(loop))


def split_simple_cycles(vertices: list[Vertex]) -> list[list[Vertex]]:
    """Cut a closed vertex walk at every repeated vertex into simple cycles.

    A loop that touches itself at a corner visits that vertex twice; each cycle
    returned here visits every vertex once.
    """
    cycles: list[list[Vertex]] = []
    stack: list[Vertex] = []
    position: dict[Vertex, int] = {}

    for v in vertices:
        if v in position:
            cut = position[v]
            cycle = stack[cut:]
            for u in cycle[1:]:
                del position[u]
            del stack[cut + 1 :]
            cycles.append(cycle)
        else:
            position[v] = len(stack)
            stack.append(v)

    if len(stack) > 1:
        cycles.append(stack)
    return cycles


def loops_to_geometry(loops: list[Loop]) -> BaseGeometry:
    """Area covered by ``loops`` under the even-odd rule, in grid units."""
    polygons = [
        Polygon(cycle)
        for loop in loops
        for cycle in split_simple_cycles(loop_vertices(loop))
        if len(cycle) >= 4
    ]
    if not polygons:
        return Polygon()
    return reduce(lambda acc, poly: acc.symmetric_difference(poly), polygons)


def cells_to_geometry(cells: NDArray[np.bool_]) -> BaseGeometry:
    """Union of the unit squares of all dark cells, in grid units (x = col, y = row)."""
    squares = [box(int(c), int(r), int(c) + 1, int(r) + 1) for r, c in np.argwhere(cells)]
    if not squares:
        return Polygon()
    return unary_union(squares)
