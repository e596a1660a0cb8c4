"""
Logging setup.

Library modules log through ``logging.getLogger(__name__)``; applications
embedding the directory call ``setup_structured_logging()`` once at startup.
It installs one root handler whose ``ProcessorFormatter`` renders both
structlog events and standard library records with the same JSON or console
renderer.
"""

import logging
import sys
from typing import Any

import structlog

from .config import Settings, settings as default_settings

LOG_HANDLER_NAME = "bistro"


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="ISO"),
    ]


def _build_renderer(config: Settings) -> Any:
    if config.LOG_FORMAT == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=config.ENVIRONMENT == "local")


def _build_handler(config: Settings) -> logging.Handler:
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _build_renderer(config),
        ],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(LOG_HANDLER_NAME)
    handler.setFormatter(formatter)
    return handler


def setup_structured_logging(config: Settings | None = None) -> None:
    """
    Configure structlog and the standard library root logger.

    Calling it again replaces the handler installed by the previous call.
    """
    config = config or default_settings
    log_level = getattr(logging, config.LOG_LEVEL, logging.INFO)

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == LOG_HANDLER_NAME:
            root_logger.removeHandler(handler)
    root_logger.addHandler(_build_handler(config))
    root_logger.setLevel(log_level)
    logging.getLogger("bistro").setLevel(log_level)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
