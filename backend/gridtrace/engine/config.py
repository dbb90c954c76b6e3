"""Render configuration: strategy, scale and document wrapping."""

from __future__ import annotations

from dataclasses import dataclass

# Pixel size of one module when the caller does not pick one.
DEFAULT_RECT_MODULE_SIZE = 11
DEFAULT_PATH_MODULE_SIZE = 10


@dataclass
class RenderOptions:
    """Options for one render call. Color and hint strings are passed through as-is."""

    # Padding around the grid in pixels
    offset: int = 0
    # Background color (e.g. "ffffff"); None = no background rect
    fill: str | None = None
    # Foreground (module) color
    color: str = "000"
    # Pixel size of one module; None = strategy default
    module_size: int | None = None
    # SVG shape-rendering: auto | optimizeSpeed | crispEdges | geometricPrecision
    shape_rendering: str = "crispEdges"
    # Full SVG document, or a fragment to embed in another SVG; None = True
    standalone: bool | None = True
    # Trace contours into one path instead of one rect per module
    use_path: bool = False

    def __post_init__(self) -> None:
        self.offset = int(self.offset or 0)
        if self.standalone is None:
            self.standalone = True

    @property
    def strategy(self) -> str:
        return "path" if self.use_path else "rect"

    @property
    def resolved_module_size(self) -> int:
        if self.module_size is not None:
            return self.module_size
        return DEFAULT_PATH_MODULE_SIZE if self.use_path else DEFAULT_RECT_MODULE_SIZE
