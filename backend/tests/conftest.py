"""Shared test fixtures."""

from __future__ import annotations

import pytest

from gridtrace.engine.grid import MatrixGrid
from gridtrace.utils.rasterizer import grid_from_text


# Module grids in grid_to_text format: X = dark, . = light

ISOLATED_CELL = """
. . .
. X .
. . .
"""

RING = """
X X X
X . X
X X X
"""

# Two modules touching only at a corner.
DIAGONAL = """
X .
. X
"""

# Two holes touching at a corner, top-left to bottom-right. Traced as two loops.
DIAGONAL_HOLES = """
X X X .
X . X X
X X . X
. X X X
"""

# Two holes touching at a corner, top-right to bottom-left. The tracer walks
# through the shared vertex and traces both holes as one self-touching loop.
TOUCHING_HOLES = """
X X X X
X X . X
X . X X
X X X X
"""

# Outer ring, hole, island inside the hole.
NESTED = """
X X X X X
X . . . X
X . X . X
X . . . X
X X X X X
"""

CHECKERBOARD = """
X . X .
. X . X
X . X .
. X . X
"""

# 21x21 finder-pattern corner layout of a QR symbol plus some noise.
QR_LIKE = """
X X X X X X X . . X . X . . X X X X X X X
X . . . . . X . X . . . X . X . . . . . X
X . X X X . X . . X X . . . X . X X X . X
X . X X X . X . X X . X X . X . X X X . X
X . X X X . X . . . X . . . X . X X X . X
X . . . . . X . X . . X . . X . . . . . X
X X X X X X X . X . X . X . X X X X X X X
. . . . . . . . X X . . X . . . . . . . .
X . X X . X X X . . X X . X . X X . . X .
. X . . X . . X X . . X . . X . . X X . X
X . . X X . X . . X . . X X . X . X . X X
. X X . . X . X X . X . X . . X X . X . .
X . . X . X X . . X X X . X . . X X . . X
. . . . . . . . X . . X . . X . . X . X .
X X X X X X X . . X . . X X . X X . X X .
X . . . . . X . X X X . . X . . X . . X X
X . X X X . X . . . X X . . X X . X . . .
X . X X X . X . X . . . X . X . . X X X .
X . X X X . X . X X . X . X . X . . X . X
X . . . . . X . . X X . . . X . X X . . X
X X X X X X X . X . X X . X . . X . X X X
"""

ALL_GRIDS = {
    "isolated": ISOLATED_CELL,
    "ring": RING,
    "diagonal": DIAGONAL,
    "diagonal_holes": DIAGONAL_HOLES,
    "touching_holes": TOUCHING_HOLES,
    "nested": NESTED,
    "checkerboard": CHECKERBOARD,
    "qr_like": QR_LIKE,
}


def make_grid(text: str) -> MatrixGrid:
    return MatrixGrid(grid_from_text(text))


@pytest.fixture
def isolated_grid() -> MatrixGrid:
    return make_grid(ISOLATED_CELL)


@pytest.fixture
def ring_grid() -> MatrixGrid:
    return make_grid(RING)


@pytest.fixture
def empty_grid() -> MatrixGrid:
    return MatrixGrid([[False] * 5 for _ in range(5)])


@pytest.fixture
def qr_like_grid() -> MatrixGrid:
    return make_grid(QR_LIKE)
