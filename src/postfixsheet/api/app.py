"""FastAPI application factory."""

from fastapi import FastAPI

from .. import __version__
from .routes import router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="PostfixSheet",
        description="Evaluate CSV spreadsheets of postfix expressions",
        version=__version__,
    )

    # API routes
    app.include_router(router, prefix="/api")

    return app
