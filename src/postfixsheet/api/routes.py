"""API routes for PostfixSheet."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..config import settings
from ..evaluator import EvaluationErrorKind
from ..evaluator.syntax import column_index, is_reference, row_index
from ..grid import GridRenderer, build_grid

logger = logging.getLogger(__name__)

router = APIRouter()

# Rows in HTTP responses are always newline separated
HTTP_LINE_SEPARATOR = "\n"


class RenderRequest(BaseModel):
    """Request to render a whole spreadsheet."""

    content: str


class RenderResponse(BaseModel):
    """Rendered spreadsheet."""

    output: str
    rows: int
    columns: int
    errors: int


class EvaluateRequest(BaseModel):
    """Request to evaluate a single cell of a spreadsheet."""

    content: str
    cell: str  # e.g. "A1"


class EvaluateResponse(BaseModel):
    """Evaluation of a single cell."""

    cell: str
    value: Optional[float] = None
    error: Optional[EvaluationErrorKind] = None
    message: Optional[str] = None
    rendered: str


@router.post("/render", response_model=RenderResponse)
def render(request: RenderRequest):
    """Evaluate every cell and render the grid as CSV text."""
    renderer = GridRenderer()
    grid = build_grid(request.content)
    results = renderer.evaluate_all(grid)

    output = HTTP_LINE_SEPARATOR.join(
        ",".join(renderer.format_result(result) for result in row) for row in results
    )

    return RenderResponse(
        output=output,
        rows=grid.row_count,
        columns=grid.column_count,
        errors=sum(1 for row in results for result in row if not result.ok),
    )


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate(request: EvaluateRequest):
    """Evaluate one cell, addressed as column letter plus one-based row."""
    if not is_reference(request.cell):
        raise HTTPException(status_code=400, detail=f"Invalid cell reference: {request.cell}")

    grid = build_grid(request.content)
    row = row_index(request.cell[1:])
    column = column_index(request.cell[0])

    if not grid.in_bounds(row, column):
        raise HTTPException(status_code=404, detail=f"Cell {request.cell} is outside the grid")

    renderer = GridRenderer()
    result = renderer.evaluator.evaluate(grid.cell(row, column), grid)

    return EvaluateResponse(
        cell=request.cell.upper(),
        value=result.value,
        error=result.error,
        message=result.message,
        rendered=renderer.format_result(result),
    )


@router.get("/health")
async def health_check():
    """Health check endpoint with non-secret configuration."""
    config = {
        "decimal_places": settings.decimal_places,
        "error_marker": settings.error_marker,
        "cycle_detection": settings.cycle_detection,
        "max_reference_depth": settings.max_reference_depth,
        "memoize_references": settings.memoize_references,
    }

    return {"status": "ok", "service": "postfixsheet", "config": config}
