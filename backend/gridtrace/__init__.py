"""GridTrace — render boolean module grids to compact SVG."""

__version__ = "0.1.0"
