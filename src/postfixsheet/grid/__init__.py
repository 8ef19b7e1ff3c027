"""CSV grid building and rendering."""

from .models import Grid
from .builder import build_grid, split_rows
from .renderer import GridRenderer, format_value

__all__ = [
    "Grid",
    "build_grid",
    "split_rows",
    "GridRenderer",
    "format_value",
]
