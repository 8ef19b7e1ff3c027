"""Render an evaluated grid back to CSV text."""

import logging
from typing import Optional

from ..config import Settings, settings
from ..evaluator import CellEvaluator, EvaluationResult
from .builder import COLUMN_SEPARATOR, build_grid
from .models import Grid

logger = logging.getLogger(__name__)


def format_value(value: float, decimal_places: int) -> str:
    """
    Format a value rounded to a fixed number of decimal places.

    Fixed notation without exponent; trailing zeros and a trailing decimal
    point are dropped and negative zero is written as ``0``.

    Examples:
        7.0 -> "7", 1/3 -> "0.333", 2.50 -> "2.5"
    """
    text = f"{value:.{decimal_places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


class GridRenderer:
    """Evaluates every cell of a grid and renders the results as CSV."""

    def __init__(
        self,
        config: Optional[Settings] = None,
        evaluator: Optional[CellEvaluator] = None,
    ):
        self.config = config or settings
        self.evaluator = evaluator or CellEvaluator(self.config)

    def evaluate_all(self, grid: Grid) -> list[list[EvaluationResult]]:
        """
        Evaluate every cell in row-major order.

        Args:
            grid: The grid to evaluate

        Returns:
            Results laid out like the grid's rows
        """
        # Never reused across renders; there is no invalidation
        cache: Optional[dict[tuple[int, int], float]] = (
            {} if self.config.memoize_references else None
        )

        results = [
            [self.evaluator.evaluate(cell, grid, cache=cache) for cell in row]
            for row in grid.rows
        ]

        failed = sum(1 for row in results for result in row if not result.ok)
        logger.info(
            f"Evaluated {grid.row_count}x{grid.column_count} grid, {failed} cells failed"
        )
        return results

    def format_result(self, result: EvaluationResult) -> str:
        """Render one result as its value or the error marker."""
        if not result.ok:
            return self.config.error_marker
        return format_value(result.value, self.config.decimal_places)

    def render(self, grid: Grid, line_separator: Optional[str] = None) -> str:
        """
        Render a grid to CSV text.

        Args:
            grid: The grid to render
            line_separator: Row separator (defaults to the configured one)

        Returns:
            CSV text without a trailing separator
        """
        separator = self.config.line_separator if line_separator is None else line_separator

        return separator.join(
            COLUMN_SEPARATOR.join(self.format_result(result) for result in row)
            for row in self.evaluate_all(grid)
        )

    def render_text(self, raw_text: str, line_separator: Optional[str] = None) -> str:
        """Build a grid from CSV text and render it."""
        return self.render(build_grid(raw_text), line_separator=line_separator)
