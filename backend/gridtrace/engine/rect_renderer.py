"""One filled square per dark module. No tracing."""

from __future__ import annotations

import numpy as np

from gridtrace.engine.grid import GridAccessor, module_array


def render_rects(
    grid: GridAccessor,
    module_size: int,
    offset: int,
    color: str,
) -> list[str]:
    """Return one line of ``<rect>`` elements per grid row holding a dark module.

    Rows without dark modules produce no line at all, so the output carries no
    blank lines between rows.
    """
    cells = module_array(grid)
    lines: list[str] = []
    for row in range(cells.shape[0]):
        y = row * module_size + offset
        rects = [
            f'<rect width="{module_size}" height="{module_size}" '
            f'x="{int(col) * module_size + offset}" y="{y}" style="fill:#{color}"/>'
            for col in np.flatnonzero(cells[row])
        ]
        if rects:
            lines.append("".join(rects))
    return lines
