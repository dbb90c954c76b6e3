"""
GridTrace demo
Renders a text module grid with both strategies and compares output size.
Usage: python samples/demo_render.py [grid.txt]
"""
import sys
from pathlib import Path

from gridtrace.engine import MatrixGrid, RenderOptions, render
from gridtrace.utils.rasterizer import grid_from_text, grid_to_text

HERE = Path(__file__).resolve().parent
grid_path = Path(sys.argv[1]) if len(sys.argv) > 1 else HERE / "qr_like.txt"

cells = grid_from_text(grid_path.read_text(encoding="utf-8"))
grid = MatrixGrid(cells)

print(grid_to_text(cells))
print()

for use_path in (False, True):
    result = render(grid, RenderOptions(use_path=use_path, offset=4, fill="ffffff"))
    out = HERE / f"{grid_path.stem}_{result.strategy}.svg"
    out.write_text(result.svg, encoding="utf-8")
    print(
        f"{result.strategy:>4}: {len(result.svg):6d} bytes, "
        f"{result.primitive_count:4d} primitives, {result.loop_count:3d} loops -> {out.name}"
    )
