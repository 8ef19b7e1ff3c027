"""HTTP API for PostfixSheet."""

from .app import create_app

__all__ = ["create_app"]
