"""Build a cell grid from raw CSV text."""

import logging

from ..evaluator.models import Cell
from .models import Grid

logger = logging.getLogger(__name__)

ROW_SEPARATOR = "\n"
COLUMN_SEPARATOR = ","


def split_rows(raw_text: str) -> list[list[str]]:
    """
    Split CSV text into padded rows of raw cell strings.

    Rows shorter than the widest row are padded with empty strings. Values
    are split on every comma; there is no quoting.

    Args:
        raw_text: The CSV file content

    Returns:
        Rectangular list of rows, empty for empty input
    """
    if not raw_text:
        return []

    rows = [line.split(COLUMN_SEPARATOR) for line in raw_text.split(ROW_SEPARATOR)]
    width = max(len(row) for row in rows)

    return [row + [""] * (width - len(row)) for row in rows]


def build_grid(raw_text: str) -> Grid:
    """Build a grid with one cell per (row, column) of the CSV text."""
    values = split_rows(raw_text)

    grid = Grid(
        rows=[
            [
                Cell(row=row_index, column=column_index, content=content)
                for column_index, content in enumerate(row)
            ]
            for row_index, row in enumerate(values)
        ]
    )

    logger.debug(f"Built {grid.row_count}x{grid.column_count} grid")
    return grid
