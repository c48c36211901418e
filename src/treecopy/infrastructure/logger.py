"""structlog wiring for treecopy.

Library modules only ask structlog for a logger, so whatever configuration the
host application installed stays in charge. The command-line entry point is the
one place that calls :func:`setup_logging`.
"""

from __future__ import annotations

import logging
import sys

import structlog

from treecopy.infrastructure.config import LOG_LEVEL

logger = structlog.get_logger("treecopy")


def _level_number(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Send structlog events to stderr at ``level`` and above.

    stdout carries the CLI's JSON result, so nothing is logged there.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def install_exception_hooks() -> None:
    """Log anything that escapes the CLI as a critical event before exiting."""
    previous_hook = sys.excepthook

    def log_uncaught(exc_type, exc_value, exc_traceback):  # type: ignore[no-untyped-def]
        if issubclass(exc_type, KeyboardInterrupt):
            previous_hook(exc_type, exc_value, exc_traceback)
            return
        logger.critical("treecopy crashed", exc_info=(exc_type, exc_value, exc_traceback))

    sys.excepthook = log_uncaught
