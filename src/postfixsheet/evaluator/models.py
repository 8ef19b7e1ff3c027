"""Data models and error taxonomy for cell evaluation."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class EvaluationErrorKind(str, Enum):
    """Why a cell failed to evaluate."""

    OUT_OF_RANGE = "out_of_range"  # Reference points outside the grid
    SELF_REFERENCE = "self_reference"  # Cell references itself
    MUTUAL_REFERENCE = "mutual_reference"  # Target references the owner back (one hop)
    CIRCULAR_REFERENCE = "circular_reference"  # Reference re-enters the evaluation chain
    REFERENCE_DEPTH_EXCEEDED = "reference_depth_exceeded"  # Cycle reached the depth limit
    PROPAGATED_FAILURE = "propagated_failure"  # Referenced cell failed
    INSUFFICIENT_OPERANDS = "insufficient_operands"  # Operator with < 2 stack values
    MALFORMED_EXPRESSION = "malformed_expression"  # Residual stack size != 1
    UNRECOGNIZED_TOKEN = "unrecognized_token"  # Not a literal, reference or operator
    NON_FINITE_RESULT = "non_finite_result"  # Result is infinite or NaN


class TokenType(str, Enum):
    """Classification of a cell token."""

    LITERAL = "literal"
    REFERENCE = "reference"
    OPERATOR = "operator"
    INVALID = "invalid"


class Cell(BaseModel):
    """A single grid position and its raw text."""

    model_config = ConfigDict(frozen=True)

    row: int  # Zero-based
    column: int  # Zero-based
    content: str = ""

    @property
    def coordinates(self) -> tuple[int, int]:
        return self.row, self.column


class EvaluationResult(BaseModel):
    """Outcome of evaluating one cell."""

    row: int
    column: int
    value: Optional[float] = None
    error: Optional[EvaluationErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, row: int, column: int, value: float) -> "EvaluationResult":
        return cls(row=row, column=column, value=value)

    @classmethod
    def failure(cls, row: int, column: int, exc: "CellEvaluationError") -> "EvaluationResult":
        return cls(row=row, column=column, error=exc.kind, message=str(exc))


class CellEvaluationError(Exception):
    """Base exception for a failure local to one cell."""

    kind: EvaluationErrorKind


class OutOfRangeError(CellEvaluationError):
    """Exception raised when a reference points outside the grid."""

    kind = EvaluationErrorKind.OUT_OF_RANGE


class SelfReferenceError(CellEvaluationError):
    """Exception raised when a cell references itself."""

    kind = EvaluationErrorKind.SELF_REFERENCE


class MutualReferenceError(CellEvaluationError):
    """Exception raised when the referenced cell points straight back."""

    kind = EvaluationErrorKind.MUTUAL_REFERENCE


class CircularReferenceError(CellEvaluationError):
    """Exception raised when a reference re-enters the chain being evaluated."""

    kind = EvaluationErrorKind.CIRCULAR_REFERENCE


class ReferenceDepthError(CellEvaluationError):
    """Exception raised when a cycle reaches the maximum reference depth."""

    kind = EvaluationErrorKind.REFERENCE_DEPTH_EXCEEDED


class PropagatedFailureError(CellEvaluationError):
    """Exception raised when a referenced cell failed to evaluate."""

    kind = EvaluationErrorKind.PROPAGATED_FAILURE

    def __init__(
        self,
        message: str,
        cause: EvaluationErrorKind,
        origin: Optional["CellEvaluationError"] = None,
    ):
        self.cause = cause
        # Innermost failure, so messages stay short along long chains
        self.origin = origin
        super().__init__(message)


class InsufficientOperandsError(CellEvaluationError):
    """Exception raised when an operator has fewer than two operands."""

    kind = EvaluationErrorKind.INSUFFICIENT_OPERANDS


class MalformedExpressionError(CellEvaluationError):
    """Exception raised when an expression does not reduce to one value."""

    kind = EvaluationErrorKind.MALFORMED_EXPRESSION


class UnrecognizedTokenError(CellEvaluationError):
    """Exception raised for a token that is not a literal, reference or operator."""

    kind = EvaluationErrorKind.UNRECOGNIZED_TOKEN


class NonFiniteResultError(CellEvaluationError):
    """Exception raised when a cell evaluates to infinity or NaN."""

    kind = EvaluationErrorKind.NON_FINITE_RESULT


class UnrecognizedOperatorError(ValueError):
    """Exception raised when applying an operator outside the registry."""

    pass


class InvalidReferenceError(ValueError):
    """Exception raised when building a reference from an invalid token."""

    pass
