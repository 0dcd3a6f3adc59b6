import logging
import sys
from typing import Optional

import structlog

from crypto_utils import config


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure structlog for the CLI and the API.
    Falls back to the CRYPTO_UTILS_LOG_* environment variables when not given."""
    level = (level or config.log_level()).upper()
    fmt = fmt or config.log_format()

    level_value = logging.getLevelName(level)
    if not isinstance(level_value, int):
        raise ValueError(f"Invalid log level: {level}")

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer(indent=2)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        # Resolve sys.stderr per logger so redirected streams are honored.
        logger_factory=lambda *args: structlog.PrintLogger(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
