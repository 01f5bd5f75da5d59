"""
Launch helper for the FastAPI backend.

Provides the ``main()`` entry point used by the ``portfolio-api``
console script defined in ``pyproject.toml``.

Usage::

    portfolio-api                          # default: 0.0.0.0:8000
    portfolio-api --port 8080              # custom port
    portfolio-api --reload                 # auto-reload for development
    uvicorn portfolio_api.api.app:app      # direct uvicorn alternative
"""

import argparse

import uvicorn


def main() -> None:
    """Launch the FastAPI app via uvicorn."""
    from portfolio_api.config import get_settings
    from portfolio_api.core import ConfigurationError

    try:
        settings = get_settings()
    except ConfigurationError as e:
        raise SystemExit(f"portfolio-api: {e}") from None

    parser = argparse.ArgumentParser(description="Portfolio API server")
    parser.add_argument(
        "--host",
        default=settings.api.host,
        help=f"Bind host (default: {settings.api.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.api.port,
        help=f"Port number (default: {settings.api.port})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    args = parser.parse_args()

    uvicorn.run(
        "portfolio_api.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        # The request-logging middleware already records every request.
        access_log=False,
    )
