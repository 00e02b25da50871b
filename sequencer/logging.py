"""Logging configuration using structlog with colored console output."""

import logging
import sys

import structlog
from structlog.typing import Processor

from sequencer.config import Settings

# Loggers that get chatty at INFO; SQLAlchemy logs every statement when echo is on
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "alembic.runtime.migration")


def configure_logging(settings: Settings) -> None:
    """Route structlog and stdlib loggers (uvicorn, sqlalchemy, alembic) through one console renderer."""
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    # debug keeps SQL statements visible
    quiet_level = logging.INFO if settings.debug else logging.WARNING
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)


_configured = False


def setup_logging(settings: Settings) -> None:
    """Setup logging once. Safe to call multiple times."""
    global _configured
    if not _configured:
        configure_logging(settings)
        _configured = True
