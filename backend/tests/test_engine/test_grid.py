"""Tests for the grid accessor adapter."""

from __future__ import annotations

import numpy as np
import pytest

from gridtrace.engine.grid import GridAccessor, MatrixGrid, grid_module_count, module_array


class _ListGrid:
    """Minimal third-party accessor: only the two protocol members."""

    def __init__(self, rows: list[list[bool]]) -> None:
        self.rows = rows

    @property
    def module_count(self) -> int:
        return len(self.rows)

    def is_dark(self, row: int, col: int) -> bool:
        return self.rows[row][col]


def test_matrix_grid_from_lists():
    grid = MatrixGrid([[True, False], [False, False]])
    assert grid.module_count == 2
    assert grid.is_dark(0, 0)
    assert not grid.is_dark(0, 1)
    assert isinstance(grid, GridAccessor)


def test_matrix_grid_rejects_non_square():
    with pytest.raises(ValueError, match="square"):
        MatrixGrid([[True, False, True], [False, False, False]])


def test_matrix_grid_rejects_1d():
    with pytest.raises(ValueError, match="2-D"):
        MatrixGrid([True, False])


def test_matrix_grid_is_read_only_copy():
    source = np.zeros((3, 3), dtype=bool)
    grid = MatrixGrid(source)
    source[1, 1] = True
    assert not grid.is_dark(1, 1)
    with pytest.raises(ValueError):
        grid.to_array()[0, 0] = True


def test_module_array_reads_any_accessor():
    rows = [[False, True, False], [True, True, True], [False, True, False]]
    cells = module_array(_ListGrid(rows))
    assert cells.dtype == np.bool_
    assert cells.tolist() == rows


class _CallableCountGrid(_ListGrid):
    """Accessor with ``module_count()`` as a plain method."""

    def module_count(self) -> int:  # type: ignore[override]
        return len(self.rows)


def test_grid_module_count_property_or_method():
    rows = [[True, False], [False, True]]
    assert grid_module_count(_ListGrid(rows)) == 2
    assert grid_module_count(_CallableCountGrid(rows)) == 2
    assert grid_module_count(MatrixGrid(rows)) == 2


def test_module_array_reads_method_accessor():
    rows = [[False, True], [True, False]]
    assert module_array(_CallableCountGrid(rows)).tolist() == rows
    assert isinstance(_CallableCountGrid(rows), GridAccessor)
