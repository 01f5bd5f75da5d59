"""
Logging configuration for portfolio-api.

Every module obtains its logger through ``get_logger(__name__)`` so that
all records live under the ``portfolio_api`` namespace and share one
handler. Rich is used for console output when running interactively
(CLI in a terminal); plain timestamped lines otherwise (uvicorn under a
process manager, CI, piped output).

Importing almost any module configures logging at the ``LOG_LEVEL``
default, so entry points that want a different level (``--verbose``)
call ``configure_logging(level, force=True)``.

Configuration:
    LOG_LEVEL environment variable controls the logging level.
    Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)

Usage:
    from portfolio_api.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Loaded profile for %s", profile.email)
"""

import logging
import os
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "portfolio_api"

PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
PLAIN_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers quieted by suppress_third_party_loggers().
NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "multipart")

_logging_configured = False


def _get_log_level() -> int:
    """Return the level named by LOG_LEVEL, falling back to INFO."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _build_handler(use_rich: bool) -> logging.Handler:
    if use_rich and sys.stdout.isatty():
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            # Profile text may contain square brackets.
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        return handler

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt=PLAIN_DATE_FORMAT))
    return handler


def configure_logging(
    level: Optional[int] = None,
    use_rich: bool = True,
    force: bool = False,
) -> None:
    """
    Attach a single handler to the ``portfolio_api`` logger.

    Later calls are no-ops unless ``force`` is set, in which case the
    handler is replaced and the new level applied.

    Args:
        level: Logging level. If None, reads from LOG_LEVEL env var.
        use_rich: Use RichHandler when stdout is a terminal.
        force: Rebuild the handler even if logging is already configured.
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    log_level = _get_log_level() if level is None else level

    handler = _build_handler(use_rich)
    handler.setLevel(log_level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(log_level)
    # Uvicorn configures the root logger; avoid printing every record twice.
    logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger inside the package namespace.

    Configures logging with defaults on first use. Names outside the
    namespace are prefixed, so ``get_logger("seed")`` yields
    ``portfolio_api.seed``.
    """
    if not _logging_configured:
        configure_logging()

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)


def suppress_third_party_loggers() -> None:
    """Set the HTTP stack's chatty loggers to WARNING."""
    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
