"""structlog setup for the discount engine.

Modules log through ``structlog.get_logger(__name__)`` with snake_case event
names and keyword context. Call ``configure_logging`` once at startup.
"""
import logging

import structlog

from discount_engine.config import LoggingConfig


def configure_logging(config: LoggingConfig = LoggingConfig()) -> None:
    """Configure structlog with a level filter and a renderer."""
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")

    renderer = (
        structlog.processors.JSONRenderer()
        if config.json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
