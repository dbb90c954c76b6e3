"""Write the final SVG output around the rendered primitives."""

from __future__ import annotations

XML_DECLARATION = '<?xml version="1.0" standalone="yes"?>'
SVG_CLOSE_TAG = "</svg>"


def canvas_dimension(module_count: int, module_size: int, offset: int) -> int:
    """Width and height of the square canvas in pixels."""
    return module_count * module_size + 2 * offset


def svg_open_tag(dimension: int, shape_rendering: str) -> str:
    return (
        '<svg version="1.1" xmlns="http://www.w3.org/2000/svg"'
        ' xmlns:xlink="http://www.w3.org/1999/xlink"'
        ' xmlns:ev="http://www.w3.org/2001/xml-events"'
        f' width="{dimension}" height="{dimension}" shape-rendering="{shape_rendering}">'
    )


def background_rect(dimension: int, fill: str) -> str:
    return (
        f'<rect width="{dimension}" height="{dimension}" x="0" y="0" '
        f'style="fill:#{fill}"/>'
    )


def assemble_svg(
    primitives: list[str],
    dimension: int,
    shape_rendering: str = "crispEdges",
    fill: str | None = None,
    standalone: bool = True,
) -> str:
    """Join primitives into a document (``standalone``) or an embeddable fragment."""
    lines = list(primitives)

    if fill:
        lines.insert(0, background_rect(dimension, fill))

    if standalone:
        lines = [XML_DECLARATION, svg_open_tag(dimension, shape_rendering), *lines, SVG_CLOSE_TAG]

    return "\n".join(lines)
