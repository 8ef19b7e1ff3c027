"""Configuration management for PostfixSheet."""

import codecs
import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()


def _parse_line_separator() -> str:
    """Parse the rendered row separator from environment variable."""
    separator_env = os.getenv("LINE_SEPARATOR")
    if separator_env:
        # Allow "\n" / "\r\n" written literally in .env files
        return codecs.decode(separator_env, "unicode_escape")
    return os.linesep


class Settings(BaseModel):
    """Application settings."""

    model_config = ConfigDict(validate_default=True)

    # Rendering
    decimal_places: int = Field(default=int(os.getenv("DECIMAL_PLACES", "3")), ge=0)
    error_marker: str = os.getenv("ERROR_MARKER", "#ERR")
    line_separator: str = _parse_line_separator()

    # Reference resolution
    # "legacy" only rejects self and one-hop mutual references,
    # "harden" also rejects any reference back into the chain being evaluated
    cycle_detection: Literal["legacy", "harden"] = os.getenv("CYCLE_DETECTION", "legacy")
    # Chain length at which a legacy-mode cycle is abandoned
    max_reference_depth: int = Field(default=int(os.getenv("MAX_REFERENCE_DEPTH", "100")), ge=1)
    memoize_references: bool = os.getenv("MEMOIZE_REFERENCES", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

    # Server settings
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))


settings = Settings()
