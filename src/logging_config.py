"""structlog setup shared by the stdio and HTTP entry points."""

import logging
import sys

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Route structured logs to stderr as JSON lines.

    stdout is reserved for protocol messages when serving over stdio.

    Args:
        level: Minimum level name (e.g., "INFO", "DEBUG").
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
