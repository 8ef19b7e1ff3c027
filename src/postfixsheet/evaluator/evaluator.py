"""Postfix evaluation of a single cell."""

import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generator, Optional

from ..config import Settings, settings
from .models import (
    Cell,
    CellEvaluationError,
    EvaluationResult,
    InsufficientOperandsError,
    MalformedExpressionError,
    NonFiniteResultError,
    TokenType,
    UnrecognizedTokenError,
)
from .operators import apply_operator
from .references import CellReference, ReferenceResolver
from .syntax import classify_token, tokenize

if TYPE_CHECKING:
    from ..grid.models import Grid

logger = logging.getLogger(__name__)

# Yields the references a cell needs, receives their values, returns the cell's value
TokenSteps = Generator[CellReference, float, float]


@dataclass
class EvaluationContext:
    """Per-evaluation state shared by nested reference resolution."""

    grid: "Grid"
    # Successful values keyed by (row, column); lives for one render at most
    cache: Optional[dict[tuple[int, int], float]] = None
    # Cells currently being evaluated, outermost first
    chain: list[tuple[int, int]] = field(default_factory=list)
    active: Counter = field(init=False, repr=False)

    def __post_init__(self):
        self.active = Counter(self.chain)

    def enter(self, coordinates: tuple[int, int]):
        self.chain.append(coordinates)
        self.active[coordinates] += 1

    def leave(self):
        coordinates = self.chain.pop()
        self.active[coordinates] -= 1
        if not self.active[coordinates]:
            del self.active[coordinates]

    def is_active(self, coordinates: tuple[int, int]) -> bool:
        """Check if a cell is somewhere in the chain being evaluated."""
        return coordinates in self.active


@dataclass
class _Frame:
    """A cell suspended while one of its references is evaluated."""

    cell: Cell
    steps: TokenSteps
    pending: Optional[CellReference] = None


class CellEvaluator:
    """Evaluates cell content written in Reverse Polish Notation."""

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or settings
        self.resolver = ReferenceResolver(self)

    def evaluate(
        self,
        cell: Cell,
        grid: "Grid",
        cache: Optional[dict[tuple[int, int], float]] = None,
    ) -> EvaluationResult:
        """
        Evaluate a cell against a grid snapshot.

        Failures never escape; they are reported in the result.

        Args:
            cell: The cell to evaluate
            grid: The grid the cell's references resolve against
            cache: Optional per-render cache of already computed values

        Returns:
            EvaluationResult with either a finite value or an error kind
        """
        context = EvaluationContext(grid=grid, cache=cache)

        try:
            value = self.evaluate_value(cell, context)
        except CellEvaluationError as e:
            logger.warning(f"Cell ({cell.row}, {cell.column}) failed [{e.kind.value}]: {e}")
            return EvaluationResult.failure(cell.row, cell.column, e)

        return EvaluationResult.success(cell.row, cell.column, value)

    def evaluate_value(self, cell: Cell, context: EvaluationContext) -> float:
        """
        Compute a cell's value, raising on failure.

        References are followed with an explicit stack of suspended cells
        instead of recursion, so a chain may be as long as the grid allows.

        Raises:
            CellEvaluationError: If the cell cannot be evaluated
        """
        cached = self._cached(cell, context)
        if cached is not None:
            return cached

        frames = [self._enter(cell, context)]
        value: Optional[float] = None

        try:
            while True:
                frame = frames[-1]
                try:
                    frame.pending = frame.steps.send(value)
                except StopIteration as stop:
                    value = self._finish(frame.cell, stop.value, context)
                    frames.pop()
                    context.leave()
                    if not frames:
                        return value
                    continue

                target = self.resolver.lookup(frame.pending, context)
                logger.debug(f"Resolving {frame.pending.token} -> {target.coordinates}")

                value = self._cached(target, context)
                if value is None:
                    frames.append(self._enter(target, context))
        except CellEvaluationError as e:
            raise self._unwind(frames, e, context)

    def _enter(self, cell: Cell, context: EvaluationContext) -> _Frame:
        context.enter(cell.coordinates)
        return _Frame(cell=cell, steps=self._evaluate_tokens(cell, context))

    def _unwind(
        self, frames: list[_Frame], error: CellEvaluationError, context: EvaluationContext
    ) -> CellEvaluationError:
        """Fail the innermost cell and every cell waiting on it, outermost error last."""
        frames.pop().steps.close()
        context.leave()

        while frames:
            frame = frames.pop()
            frame.steps.close()
            context.leave()
            error = self.resolver.propagate(frame.pending, error)

        return error

    def _cached(self, cell: Cell, context: EvaluationContext) -> Optional[float]:
        if context.cache is None:
            return None
        return context.cache.get(cell.coordinates)

    def _finish(self, cell: Cell, value: float, context: EvaluationContext) -> float:
        if not math.isfinite(value):
            raise NonFiniteResultError(f"Expression evaluated to {value}")

        if context.cache is not None:
            context.cache[cell.coordinates] = value
        return value

    def _evaluate_tokens(self, cell: Cell, context: EvaluationContext) -> TokenSteps:
        tokens = tokenize(cell.content)

        # An empty cell renders as zero
        if not tokens:
            return 0.0

        stack: list[float] = []

        for token in tokens:
            token_type = classify_token(token)
            logger.debug(f"Token {token!r} in ({cell.row}, {cell.column}) is {token_type.value}")

            if token_type == TokenType.LITERAL:
                stack.append(float(token))

            elif token_type == TokenType.REFERENCE:
                reference = CellReference.parse(cell.row, cell.column, token)
                stack.append((yield reference))

            elif token_type == TokenType.OPERATOR:
                if len(stack) < 2:
                    raise InsufficientOperandsError(
                        f"Operator {token} needs two operands, found {len(stack)}"
                    )
                right = stack.pop()
                left = stack.pop()
                stack.append(apply_operator(left, right, token))

            else:
                raise UnrecognizedTokenError(f"Unrecognized token: {token!r}")

        if len(stack) != 1:
            raise MalformedExpressionError(
                f"Expression left {len(stack)} values on the stack, expected 1"
            )

        return stack[0]
