"""Command-line interface for PostfixSheet."""

import argparse
import logging
import os
from pathlib import Path
from typing import Optional, Sequence

import uvicorn

from .config import settings
from .grid import GridRenderer

ERR_INVALID_INPUT = (
    "Spreadsheet program received invalid arguments. "
    "Please refer to documentation for correct program input."
)
ERR_FILE_PATH = "Could not find file at path: {0}"


def _setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Render the spreadsheet file given as the only argument.

    Invalid arguments and missing files are reported on stdout; neither is
    treated as a failing exit.
    """
    parser = argparse.ArgumentParser(
        description="PostfixSheet - evaluate a CSV spreadsheet of postfix expressions"
    )
    # Argument count is checked below to print the invalid arguments message
    parser.add_argument("paths", nargs="*", help="Path to the input CSV file")
    # Dash-prefixed arguments are file names too, never options to reject
    args, unknown = parser.parse_known_args(argv)
    paths = args.paths + unknown

    _setup_logging()

    if len(paths) != 1 or not paths[0]:
        print(ERR_INVALID_INPUT)
        return 0

    file_path = Path(os.getcwd()) / paths[0]
    if not file_path.is_file():
        print(ERR_FILE_PATH.format(file_path))
        return 0

    content = file_path.read_text(encoding="utf-8")
    print(GridRenderer().render_text(content))
    return 0


def serve(argv: Optional[Sequence[str]] = None):
    """Start the web server."""
    parser = argparse.ArgumentParser(description="PostfixSheet HTTP server")
    parser.add_argument(
        "--host", default=settings.host, help=f"Host to bind to (default: {settings.host})"
    )
    parser.add_argument(
        "--port", type=int, default=settings.port, help=f"Port to bind to (default: {settings.port})"
    )
    parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload for development"
    )
    args = parser.parse_args(argv)

    _setup_logging()
    run_server(args.host, args.port, args.reload)


def run_server(host: str, port: int, reload: bool):
    """Run the web server."""
    uvicorn.run(
        "postfixsheet.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


if __name__ == "__main__":
    raise SystemExit(main())
