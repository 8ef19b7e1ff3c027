"""Token syntax definitions and patterns for postfix cells."""

import re
from typing import Pattern

from .models import TokenType
from .operators import is_operator

# The ideal amount of whitespace between raw cell tokens
TOKEN_SEPARATOR = " "

# Any run of whitespace inside a cell
WHITESPACE_PATTERN: Pattern = re.compile(r"\s+")

# 12, -3, +4.5, 6., .25, 1e3, 2.5E-4
NUMERIC_LITERAL_PATTERN: Pattern = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

# First character of a cell reference (column letter)
REFERENCE_PREFIX_PATTERN: Pattern = re.compile(r"[A-Za-z]")

# Remainder of a cell reference (one-based row number)
ROW_NUMBER_PATTERN: Pattern = re.compile(r"[+-]?[0-9]+")


def sanitize_content(raw_content: str) -> str:
    """
    Collapse every run of whitespace in raw cell content to a single space.

    Args:
        raw_content: Cell text as read from the CSV input

    Returns:
        Content with uniform token separators
    """
    return WHITESPACE_PATTERN.sub(TOKEN_SEPARATOR, raw_content)


def tokenize(raw_content: str) -> list[str]:
    """Split raw cell content into non-empty tokens."""
    return [token for token in sanitize_content(raw_content).split(TOKEN_SEPARATOR) if token]


def is_numeric_literal(token: str) -> bool:
    """Check if a token is a numeric literal."""
    return NUMERIC_LITERAL_PATTERN.fullmatch(token) is not None


def is_reference(token: str) -> bool:
    """
    Check if a token attempts to be a cell reference.

    Only the first character is inspected; the row part is validated when
    the reference is parsed.
    """
    if not token:
        return False
    return REFERENCE_PREFIX_PATTERN.fullmatch(token[0]) is not None


def classify_token(token: str) -> TokenType:
    """
    Classify a token for evaluation.

    Literals take priority over references, references over operators.
    """
    if is_numeric_literal(token):
        return TokenType.LITERAL
    if is_reference(token):
        return TokenType.REFERENCE
    if is_operator(token):
        return TokenType.OPERATOR
    return TokenType.INVALID


def column_index(letter: str) -> int:
    """Zero-based alphabet position of a column letter, case insensitive."""
    return ord(letter.upper()) - ord("A")


def column_letter(index: int) -> str:
    """Column letter for a zero-based index (inverse of ``column_index``)."""
    return chr(ord("A") + index)


def row_index(row_text: str) -> int:
    """
    Zero-based row for the digits following a column letter.

    Returns -1 when the text is not an integer, which no grid contains.
    """
    if ROW_NUMBER_PATTERN.fullmatch(row_text) is None:
        return -1
    return int(row_text) - 1
