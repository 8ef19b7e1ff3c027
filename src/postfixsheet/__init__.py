"""PostfixSheet - evaluate CSV spreadsheets whose cells are postfix expressions."""

from .evaluator import CellEvaluator, EvaluationResult, EvaluationErrorKind
from .grid import Grid, GridRenderer, build_grid

__version__ = "0.1.0"

__all__ = [
    "CellEvaluator",
    "EvaluationResult",
    "EvaluationErrorKind",
    "Grid",
    "GridRenderer",
    "build_grid",
    "__version__",
]
