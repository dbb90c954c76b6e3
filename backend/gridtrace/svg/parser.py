"""Read rendered SVG back into module grids — facade over svgpathtools + regex.

Only understands the markup this package writes: ``<rect>`` modules and the
compound ``<path>`` in grid units under a translate/scale transform.
"""

from __future__ import annotations

import logging
import re

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Line, parse_path

from gridtrace.utils.rasterizer import Segment, rasterize_segments

logger = logging.getLogger(__name__)

_PATH_D_RE = re.compile(r'<path[^>]*\sd\s*=\s*"([^"]*)"[^>]*/?\s*>', re.IGNORECASE)
_RECT_TAG_RE = re.compile(r"<rect[^>]*/?\s*>", re.IGNORECASE)
_ATTR_RE = re.compile(r'([\w:-]+)\s*=\s*"([^"]*)"')
_DIMENSION_RE = re.compile(r'<svg[^>]*\swidth\s*=\s*"(\d+)"', re.IGNORECASE)
_TRANSFORM_RE = re.compile(
    r'transform\s*=\s*"translate\((-?\d+),\s*(-?\d+)\)\s*scale\((\d+)\)"',
    re.IGNORECASE,
)


def extract_path_data(svg_text: str) -> list[str]:
    """``d`` attribute of every ``<path>`` in document order."""
    return [match.group(1) for match in _PATH_D_RE.finditer(svg_text)]


def extract_dimension(svg_text: str) -> int | None:
    match = _DIMENSION_RE.search(svg_text)
    return int(match.group(1)) if match else None


def extract_transform(svg_text: str) -> tuple[int, int] | None:
    """``(offset, module_size)`` of the first path transform, if any."""
    match = _TRANSFORM_RE.search(svg_text)
    if not match:
        return None
    return int(match.group(1)), int(match.group(3))


def path_segments(d: str) -> list[Segment]:
    """Straight segments of path data as ``(start, end)`` complex pairs."""
    if not d.strip():
        return []
    segments: list[Segment] = []
    for seg in parse_path(d):
        if not isinstance(seg, Line):
            raise ValueError(f"Unexpected {type(seg).__name__} in module path")
        segments.append((seg.start, seg.end))
    return segments


def path_to_grid(
    svg_text: str,
    module_count: int,
    fill_rule: str = "nonzero",
) -> NDArray[np.bool_]:
    """Cells filled by the document's paths, in grid units."""
    segments: list[Segment] = []
    for d in extract_path_data(svg_text):
        segments.extend(path_segments(d))
    logger.debug("Rasterizing %d path segments on %dx%d grid", len(segments), module_count, module_count)
    return rasterize_segments(segments, module_count, fill_rule=fill_rule)


def rects_to_grid(
    svg_text: str,
    module_count: int,
    module_size: int,
    offset: int = 0,
) -> NDArray[np.bool_]:
    """Cells covered by module ``<rect>`` elements.

    The full-canvas background rect is skipped by its size.
    """
    cells = np.zeros((module_count, module_count), dtype=bool)
    for match in _RECT_TAG_RE.finditer(svg_text):
        attrs = dict(_ATTR_RE.findall(match.group(0)))
        if int(attrs.get("width", 0)) != module_size:
            continue
        col, col_rem = divmod(int(attrs["x"]) - offset, module_size)
        row, row_rem = divmod(int(attrs["y"]) - offset, module_size)
        if col_rem or row_rem:
            raise ValueError(f"Rect off the module lattice: {match.group(0)}")
        cells[row, col] = True
    return cells
