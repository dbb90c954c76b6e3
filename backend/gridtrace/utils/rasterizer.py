"""Rasterization utilities — rendered SVG and traced outlines back to pixels and cells.

Used to check that the path strategy fills exactly the cells the rect strategy
fills: whole documents go through CairoSVG, bare outlines through
skimage polygon filling.
"""

from __future__ import annotations

import io
from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from gridtrace.utils.geometry import signed_area, split_simple_cycles

FILL_RULES = ("nonzero", "evenodd")

# A straight segment in grid units: (start, end) as complex numbers x + yj,
# the representation svgpathtools uses for points.
Segment = tuple[complex, complex]

Vertex = tuple[int, int]


def rasterize_svg(svg_code: str, resolution: int | None = None) -> NDArray[np.uint8]:
    """Rasterize SVG to an RGBA numpy array using CairoSVG.

    Without ``resolution`` the document's own width/height are used, so one
    pixel is one SVG user unit.
    """
    import cairosvg
    from PIL import Image

    raw = svg_code.encode("utf-8") if isinstance(svg_code, str) else svg_code
    size = {} if resolution is None else {"output_width": resolution, "output_height": resolution}
    png_data = cairosvg.svg2png(bytestring=raw, **size)
    return np.array(Image.open(io.BytesIO(png_data)).convert("RGBA"))


def _closed_walks(segments: Iterable[Segment], n: int) -> list[list[Vertex]]:
    """Chain segments into closed vertex walks (closing vertex not repeated)."""
    walks: list[list[Vertex]] = []
    walk: list[Vertex] = []

    for start, end in segments:
        x0, y0 = round(start.real), round(start.imag)
        x1, y1 = round(end.real), round(end.imag)
        if x0 != x1 and y0 != y1:
            raise ValueError(f"Segment {start} -> {end} is not axis-aligned")
        if not all(0 <= v <= n for v in (x0, y0, x1, y1)):
            raise ValueError(f"Segment {start} -> {end} leaves the {n}x{n} grid")
        if (x0, y0) == (x1, y1):
            continue

        if walk and walk[-1] != (x0, y0):
            raise ValueError(f"Outline starting at {walk[0]} is not closed")
        if not walk:
            walk.append((x0, y0))
        if (x1, y1) == walk[0]:
            walks.append(walk)
            walk = []
        else:
            walk.append((x1, y1))

    if walk:
        raise ValueError(f"Outline starting at {walk[0]} is not closed")
    return walks


def rasterize_segments(
    segments: Iterable[Segment],
    module_count: int,
    fill_rule: str = "nonzero",
) -> NDArray[np.bool_]:
    """Fill an N×N grid from closed axis-aligned outlines.

    Each outline is cut into simple cycles and every cycle is filled with
    ``skimage.draw.polygon``, sampling cells at their centres. A cycle adds
    its orientation (+1 clockwise on screen, -1 otherwise) to the winding
    number of the cells it covers.
    """
    if fill_rule not in FILL_RULES:
        raise ValueError(f"Unknown fill rule {fill_rule!r}, expected one of {FILL_RULES}")

    from skimage.draw import polygon as draw_polygon

    n = module_count
    winding = np.zeros((n, n), dtype=np.int64)
    crossings = np.zeros((n, n), dtype=np.int64)

    for walk in _closed_walks(segments, n):
        for cycle in split_simple_cycles(walk):
            if len(cycle) < 3:
                continue
            points = np.array(cycle, dtype=np.float64)
            # Shift by half a cell so pixel (r, c) is the centre of cell (r, c).
            rr, cc = draw_polygon(points[:, 1] - 0.5, points[:, 0] - 0.5, shape=(n, n))
            winding[rr, cc] += 1 if signed_area(points) > 0 else -1
            crossings[rr, cc] += 1

    if fill_rule == "nonzero":
        return winding != 0
    return crossings % 2 == 1


def grid_to_text(
    grid: NDArray[np.bool_],
    filled: str = "X",
    empty: str = ".",
) -> str:
    """Convert a grid to a text representation."""
    rows = []
    for row in grid:
        rows.append(" ".join(filled if cell else empty for cell in row))
    return "\n".join(rows)


def grid_from_text(text: str, filled: str = "X") -> NDArray[np.bool_]:
    """Parse the ``grid_to_text`` format back. Blank lines and spaces are ignored."""
    rows = [line.replace(" ", "") for line in text.strip().splitlines() if line.strip()]
    if not rows:
        return np.zeros((0, 0), dtype=bool)
    return np.array([[ch == filled for ch in row] for row in rows], dtype=bool)
