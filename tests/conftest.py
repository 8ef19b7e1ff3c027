"""Pytest configuration and shared fixtures."""

import pytest

from postfixsheet.config import Settings
from postfixsheet.evaluator import CellEvaluator
from postfixsheet.grid import GridRenderer, build_grid


@pytest.fixture
def test_settings() -> Settings:
    """Create settings with deterministic rendering values."""
    return Settings(
        decimal_places=3,
        error_marker="#ERR",
        line_separator="\n",
        cycle_detection="legacy",
        max_reference_depth=100,
        memoize_references=False,
    )


@pytest.fixture
def hardened_settings(test_settings: Settings) -> Settings:
    """Settings with visited-chain cycle detection enabled."""
    return test_settings.model_copy(update={"cycle_detection": "harden"})


@pytest.fixture
def evaluator(test_settings: Settings) -> CellEvaluator:
    """Create an evaluator using the test settings."""
    return CellEvaluator(test_settings)


@pytest.fixture
def renderer(test_settings: Settings) -> GridRenderer:
    """Create a renderer using the test settings."""
    return GridRenderer(test_settings)


@pytest.fixture
def evaluate_cell(evaluator: CellEvaluator):
    """Evaluate the cell at (row, column) of a CSV snippet."""

    def _evaluate(csv_text: str, row: int = 0, column: int = 0):
        grid = build_grid(csv_text)
        return evaluator.evaluate(grid.cell(row, column), grid)

    return _evaluate
