"""
Logging setup for the key audit

structlog renders every record, including plain stdlib ``logging`` calls,
to standard error so stdout only carries the summary line.
"""

import logging
import sys
from typing import Optional

import structlog

from config.settings import settings

_HANDLER_NAME = "keyaudit-stderr"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """Configures structlog and the root stdlib logger

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR). Defaults to settings.
        json_logs: Render JSON lines instead of console output. Defaults to settings.
    """
    requested = (level or settings.log_level).upper()
    level = requested if requested in LOG_LEVELS else "WARNING"
    if json_logs is None:
        json_logs = settings.log_json

    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
        final_processors = [structlog.processors.format_exc_info, renderer]
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
        final_processors = [renderer]

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *final_processors],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    # Avoid duplicated handlers when called more than once
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level))

    if requested != level:
        structlog.get_logger(__name__).warning("unknown_log_level", requested=requested, using=level)
