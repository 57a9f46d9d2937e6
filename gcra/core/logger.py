import logging
import os
from typing import Optional

import structlog

LOG_LEVEL_ENV = "GCRA_LOG_LEVEL"

def configure_logging(log_level: Optional[str] = None, json_output: bool = True):
    """
    Configures structlog for applications embedding the limiter.
    The level falls back to $GCRA_LOG_LEVEL, then INFO. JSON lines go to
    stdout unless json_output is False (console rendering for development).
    The library itself never calls this.
    """
    level_name = (log_level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {level_name}")

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer
        ],
        logger_factory=structlog.PrintLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

def get_logger(name: str):
    return structlog.get_logger(name)
