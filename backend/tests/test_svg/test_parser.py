"""Tests for reading rendered SVG back into grids."""

from __future__ import annotations

import pytest

from gridtrace.engine.pipeline import render_svg
from gridtrace.svg.parser import (
    extract_dimension,
    extract_path_data,
    extract_transform,
    path_segments,
    path_to_grid,
    rects_to_grid,
)


def test_extract_path_data(ring_grid):
    svg = render_svg(ring_grid, use_path=True)
    assert extract_path_data(svg) == ["M0 0h3v3h-3v-3zM1 1v1h1v-1h-1z"]


def test_extract_dimension_and_transform(ring_grid):
    svg = render_svg(ring_grid, use_path=True, module_size=7, offset=3)
    assert extract_dimension(svg) == 27
    assert extract_transform(svg) == (3, 7)


def test_no_transform_for_rects(ring_grid):
    assert extract_transform(render_svg(ring_grid)) is None


def test_path_segments_are_lines():
    segments = path_segments("M1 1h1v1h-1v-1z")
    assert segments[:4] == [(1 + 1j, 2 + 1j), (2 + 1j, 2 + 2j), (2 + 2j, 1 + 2j), (1 + 2j, 1 + 1j)]


def test_path_segments_empty():
    assert path_segments("") == []


def test_curves_rejected():
    with pytest.raises(ValueError, match="CubicBezier"):
        path_segments("M0 0C1 1 2 2 3 3z")


def test_ring_hole_unfilled(ring_grid):
    svg = render_svg(ring_grid, use_path=True)
    for fill_rule in ("nonzero", "evenodd"):
        cells = path_to_grid(svg, 3, fill_rule=fill_rule)
        assert not cells[1, 1]
        assert cells.sum() == 8


def test_rects_to_grid_skips_background(ring_grid):
    svg = render_svg(ring_grid, fill="fff", module_size=5, offset=1)
    cells = rects_to_grid(svg, 3, module_size=5, offset=1)
    assert cells.tolist() == ring_grid.to_array().tolist()


def test_rects_off_lattice_rejected():
    svg = '<rect width="10" height="10" x="3" y="0" style="fill:#000"/>'
    with pytest.raises(ValueError, match="lattice"):
        rects_to_grid(svg, 2, module_size=10)
