"""Read-only view of a module grid, as the renderer consumes it."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class GridAccessor(Protocol):
    """Square boolean matrix owned by the caller. Never mutated by the renderer.

    ``module_count`` may be a method (as QR encoders usually expose it) or a
    plain attribute/property. Read it through ``grid_module_count``.
    """

    module_count: Any

    def is_dark(self, row: int, col: int) -> bool: ...


def grid_module_count(grid: GridAccessor) -> int:
    """Side length N of ``grid``, whether ``module_count`` is a method or a value."""
    count = grid.module_count
    if callable(count):
        count = count()
    return int(count)


class MatrixGrid:
    """Adapt a square 2-D array-like (nested lists, numpy array) to ``GridAccessor``."""

    def __init__(self, matrix: Any) -> None:
        cells = np.asarray(matrix, dtype=bool)
        if cells.ndim != 2:
            raise ValueError(f"Module grid must be 2-D, got {cells.ndim} dimension(s)")
        rows, cols = cells.shape
        if rows != cols:
            raise ValueError(f"Module grid must be square, got {rows}x{cols}")
        # Private read-only copy: the caller keeps ownership of its matrix.
        self._cells = cells.copy()
        self._cells.setflags(write=False)

    @property
    def module_count(self) -> int:
        return int(self._cells.shape[0])

    def is_dark(self, row: int, col: int) -> bool:
        return bool(self._cells[row, col])

    def to_array(self) -> NDArray[np.bool_]:
        return self._cells

    def __repr__(self) -> str:
        return f"MatrixGrid(module_count={self.module_count}, dark={int(self._cells.sum())})"


def module_array(grid: GridAccessor) -> NDArray[np.bool_]:
    """Read any accessor into an N×N boolean array (row-major, ``[row, col]``)."""
    if isinstance(grid, MatrixGrid):
        return grid.to_array()
    n = grid_module_count(grid)
    cells = np.zeros((n, n), dtype=bool)
    for row in range(n):
        for col in range(n):
            cells[row, col] = grid.is_dark(row, col)
    return cells
