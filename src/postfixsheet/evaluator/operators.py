"""Arithmetic operator registry for postfix expressions."""

import math
import operator
from typing import Callable

from .models import UnrecognizedOperatorError

PLUS_OPERATOR = "+"
MINUS_OPERATOR = "-"
MULTIPLICATION_OPERATOR = "*"
DIVISION_OPERATOR = "/"


def _divide(left: float, right: float) -> float:
    """Divide with IEEE semantics instead of raising ZeroDivisionError."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        # Sign follows the operands, including a signed zero divisor
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


OPERATORS: dict[str, Callable[[float, float], float]] = {
    PLUS_OPERATOR: operator.add,
    MINUS_OPERATOR: operator.sub,
    MULTIPLICATION_OPERATOR: operator.mul,
    DIVISION_OPERATOR: _divide,
}


def is_operator(token: str) -> bool:
    """Check if a token is exactly one of the registered operators."""
    return token in OPERATORS


def apply_operator(left: float, right: float, symbol: str) -> float:
    """
    Apply a binary operator.

    Args:
        left: First operand (pushed earlier)
        right: Second operand (top of the stack)
        symbol: The operator token

    Returns:
        The result of ``left <symbol> right``

    Raises:
        UnrecognizedOperatorError: If the symbol is not a registered operator
    """
    try:
        func = OPERATORS[symbol]
    except KeyError:
        raise UnrecognizedOperatorError(
            f"Could not evaluate postfix expression. Did not recognize operator: {symbol}"
        ) from None

    return func(left, right)
