"""Postfix cell evaluation.

This module provides the operator registry, cell reference resolution and
the stack-based evaluator for cells written in Reverse Polish Notation.
"""

from .models import (
    Cell,
    EvaluationResult,
    EvaluationErrorKind,
    TokenType,
    CellEvaluationError,
    OutOfRangeError,
    SelfReferenceError,
    MutualReferenceError,
    CircularReferenceError,
    ReferenceDepthError,
    PropagatedFailureError,
    InsufficientOperandsError,
    MalformedExpressionError,
    UnrecognizedTokenError,
    NonFiniteResultError,
    UnrecognizedOperatorError,
    InvalidReferenceError,
)
from .operators import OPERATORS, is_operator, apply_operator
from .references import CellReference, ReferenceResolver
from .evaluator import CellEvaluator, EvaluationContext

__all__ = [
    "Cell",
    "EvaluationResult",
    "EvaluationErrorKind",
    "TokenType",
    "CellEvaluationError",
    "OutOfRangeError",
    "SelfReferenceError",
    "MutualReferenceError",
    "CircularReferenceError",
    "ReferenceDepthError",
    "PropagatedFailureError",
    "InsufficientOperandsError",
    "MalformedExpressionError",
    "UnrecognizedTokenError",
    "NonFiniteResultError",
    "UnrecognizedOperatorError",
    "InvalidReferenceError",
    "OPERATORS",
    "is_operator",
    "apply_operator",
    "CellReference",
    "ReferenceResolver",
    "CellEvaluator",
    "EvaluationContext",
]
