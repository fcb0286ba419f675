"""recordrules: process entry point and logging setup.

The library itself never configures logging; applications call
configure_logging() once at startup (the entry point below does).
"""

import logging
from typing import Optional

import structlog

from recordrules.config import Settings, get_settings

logger = structlog.get_logger()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structured logging from settings."""
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


def main() -> None:
    configure_logging()

    from recordrules.validators import validation_engine

    logger.info(
        "app_started",
        schemas=sorted(schema.name for schema in validation_engine.schemas.values()),
    )
    print("Hello, world!")


if __name__ == "__main__":
    main()
