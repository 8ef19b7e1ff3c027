"""Data models for the cell grid."""

from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field

from ..evaluator.models import Cell


class Grid(BaseModel):
    """Rectangular, read-only grid of cells indexed by (row, column)."""

    model_config = ConfigDict(frozen=True)

    rows: list[list[Cell]] = Field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def in_bounds(self, row: int, column: int) -> bool:
        """Check if (row, column) addresses a cell of this grid."""
        return 0 <= row < self.row_count and 0 <= column < self.column_count

    def cell(self, row: int, column: int) -> Cell:
        """
        Get the cell at (row, column).

        Raises:
            IndexError: If the position is outside the grid
        """
        if not self.in_bounds(row, column):
            raise IndexError(
                f"Cell ({row}, {column}) is outside the {self.row_count}x{self.column_count} grid"
            )
        return self.rows[row][column]

    def iter_cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self.rows:
            yield from row
