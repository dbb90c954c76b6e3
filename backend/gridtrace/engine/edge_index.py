"""Unit boundary edges and the per-vertex index the loop tracer consumes.

Coordinates are grid vertices in SVG screen space: ``x`` grows to the right,
``y`` grows downwards, both in ``[0, N]`` for an N×N grid.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass


class Direction(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Edge:
    """Directed unit segment starting at vertex ``(x, y)``."""

    x: int
    y: int
    direction: Direction

    @property
    def start(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def end(self) -> tuple[int, int]:
        dx, dy = self.direction.delta
        return (self.x + dx, self.y + dy)


# A closed chain of edges: edges[i].end == edges[i + 1].start, last.end == first.start.
Loop = list[Edge]


class EdgeIndex:
    """(N+1)×(N+1) table of edge buckets keyed by start vertex, indexed ``[y][x]``.

    Buckets keep insertion order; ``first_at`` always answers with the oldest
    edge still present, which is what makes tracing reproducible.
    """

    def __init__(self, module_count: int) -> None:
        self.size = module_count + 1
        self._buckets: list[list[list[Edge]]] = [
            [[] for _ in range(self.size)] for _ in range(self.size)
        ]
        self._count = 0
        # Row-major position of the first bucket that may still hold edges.
        # Buckets only shrink while tracing, so this never has to move back.
        self._cursor = 0

    def add(self, edge: Edge) -> None:
        self._buckets[edge.y][edge.x].append(edge)
        self._count += 1
        self._cursor = min(self._cursor, edge.y * self.size + edge.x)

    def remove(self, edge: Edge) -> None:
        bucket = self._buckets[edge.y][edge.x]
        try:
            bucket.remove(edge)
        except ValueError:
            raise KeyError(edge) from None
        self._count -= 1

    def first_at(self, x: int, y: int) -> Edge | None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            return None
        bucket = self._buckets[y][x]
        return bucket[0] if bucket else None

    def out_degree(self, x: int, y: int) -> int:
        return len(self._buckets[y][x])

    def first_edge(self) -> Edge | None:
        """First edge of the first non-empty bucket in row-major (y, x) order."""
        if not self._count:
            return None
        total = self.size * self.size
        while self._cursor < total:
            y, x = divmod(self._cursor, self.size)
            bucket = self._buckets[y][x]
            if bucket:
                return bucket[0]
            self._cursor += 1
        return None

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __iter__(self) -> Iterator[Edge]:
        for row in self._buckets:
            for bucket in row:
                yield from bucket
