"""structlog setup driven by LoggingSettings."""

import logging
import sys

import structlog

from pptx_index.config.settings import LoggingSettings


def configure_logging(settings: LoggingSettings) -> None:
    """Configure structlog for the current process.

    Args:
        settings: Logging level and output format.
    """
    level = logging.getLevelName(settings.level)

    if settings.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
