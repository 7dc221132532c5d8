"""Structured logging setup."""

import logging
import sys

import structlog

from household_ledger.core.config import Settings, settings as default_settings

_configured = False


def setup_logging(config: Settings | None = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Rendering follows ``log_format``: ``json`` for machine consumption,
    ``console`` for local development. Calling this more than once is a no-op.
    """
    global _configured
    if _configured:
        return

    config = config or default_settings
    level = logging.getLevelName(config.log_level.upper())

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if config.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=config.debug)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    _configured = True
