"""Cell references and their resolution against a grid."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .models import (
    Cell,
    CellEvaluationError,
    CircularReferenceError,
    InvalidReferenceError,
    MutualReferenceError,
    OutOfRangeError,
    PropagatedFailureError,
    ReferenceDepthError,
    SelfReferenceError,
)
from .syntax import column_index, is_reference, row_index, tokenize

if TYPE_CHECKING:
    from .evaluator import CellEvaluator, EvaluationContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellReference:
    """A pointer from one cell (the owner) to another (the target)."""

    owner_row: int
    owner_column: int
    target_row: int
    target_column: int
    token: str

    @classmethod
    def parse(cls, owner_row: int, owner_column: int, token: str) -> "CellReference":
        """
        Build a reference from a token found in the owner cell.

        Args:
            owner_row: Row of the cell containing the token
            owner_column: Column of the cell containing the token
            token: A token that passed ``is_reference``

        Returns:
            CellReference; the target row is -1 when the digits are not an integer

        Raises:
            InvalidReferenceError: If the token is not reference syntax
        """
        if not is_reference(token):
            raise InvalidReferenceError(
                f"Tried to construct cell reference from invalid token: {token!r}"
            )

        return cls(
            owner_row=owner_row,
            owner_column=owner_column,
            target_row=row_index(token[1:]),
            target_column=column_index(token[0]),
            token=token,
        )

    @property
    def target(self) -> tuple[int, int]:
        return self.target_row, self.target_column

    @property
    def owner(self) -> tuple[int, int]:
        return self.owner_row, self.owner_column

    def points_to(self, row: int, column: int) -> bool:
        return self.target == (row, column)


def contains_reference_to(cell: Cell, row: int, column: int) -> bool:
    """Check if any token of a cell is a reference to (row, column)."""
    return any(
        CellReference.parse(cell.row, cell.column, token).points_to(row, column)
        for token in tokenize(cell.content)
        if is_reference(token)
    )


class ReferenceResolver:
    """Resolve cell references to the value of the target cell."""

    def __init__(self, evaluator: "CellEvaluator"):
        """
        Initialize the resolver.

        Args:
            evaluator: Evaluator whose configuration selects the cycle checks
        """
        self.evaluator = evaluator

    def lookup(self, reference: CellReference, context: "EvaluationContext") -> Cell:
        """
        Find the target cell and check it can be safely evaluated.

        Raises:
            OutOfRangeError: Target lies outside the grid
            SelfReferenceError: Target is the owner cell
            MutualReferenceError: Target references the owner cell back
            CircularReferenceError: Target is already being evaluated (hardened mode)
            ReferenceDepthError: Target is already being evaluated and the
                chain has reached the maximum depth (legacy mode)
        """
        grid = context.grid
        config = self.evaluator.config

        if not grid.in_bounds(reference.target_row, reference.target_column):
            raise OutOfRangeError(
                f"Reference {reference.token} points outside the "
                f"{grid.row_count}x{grid.column_count} grid"
            )

        if reference.target == reference.owner:
            raise SelfReferenceError(f"Reference {reference.token} points to its own cell")

        target = grid.cell(reference.target_row, reference.target_column)

        if contains_reference_to(target, reference.owner_row, reference.owner_column):
            raise MutualReferenceError(
                f"Cell {reference.token} references back to its referencing cell"
            )

        # Only a repeated cell can make a chain unbounded
        if context.is_active(target.coordinates):
            if config.cycle_detection == "harden":
                raise CircularReferenceError(
                    f"Reference {reference.token} re-enters the chain being evaluated"
                )
            if len(context.chain) >= config.max_reference_depth:
                raise ReferenceDepthError(
                    f"Reference {reference.token} exceeds the maximum depth of "
                    f"{config.max_reference_depth}"
                )

        return target

    def propagate(
        self, reference: CellReference, error: CellEvaluationError
    ) -> PropagatedFailureError:
        """
        Wrap the failure of a referenced cell for the cell that referenced it.

        Args:
            reference: The reference whose target failed
            error: The target's failure

        Returns:
            PropagatedFailureError chained to the target's failure
        """
        origin = error.origin if isinstance(error, PropagatedFailureError) else error
        failure = PropagatedFailureError(
            f"Referenced cell {reference.token} failed: {origin}",
            cause=error.kind,
            origin=origin,
        )
        failure.__cause__ = error
        return failure
