"""
Structured logging configuration.

Uses structlog on top of the standard library so every module can call
``structlog.get_logger(__name__)`` and emit snake_case events with fields:

    logger.info("payment_processed", payment_method="PayPal", amount=149.5)

Never log secrets: passwords, CVVs, full card, account or routing numbers.
Last-four digits are fine.
"""
import logging
import sys
from functools import partial
from typing import Any, Optional

import structlog
from pythonjsonlogger.json import JsonFormatter

from payment_patterns.config import Settings, get_settings


def add_app_context(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
    settings: Optional[Settings] = None,
) -> dict[str, Any]:
    """
    Add application context to log events.

    Args:
        logger: Logger instance
        method_name: Log method name
        event_dict: Event dictionary
        settings: Settings to read app name/env from (defaults to get_settings())

    Returns:
        dict[str, Any]: Enhanced event dictionary
    """
    settings = settings or get_settings()
    event_dict["app_name"] = settings.app_name
    event_dict["app_env"] = settings.app_env
    return event_dict


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure structured logging.

    Sets up:
    - JSON-formatted logs (or coloured console output when ``log_json`` is off)
    - contextvars-bound fields merged into every event
    - Root logger level from settings
    """
    settings = settings or get_settings()

    renderer: Any
    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            partial(add_app_context, settings=settings),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_json:
        handler.setFormatter(
            JsonFormatter(
                "%(asctime)s %(levelname)s %(name)s %(message)s",
                rename_fields={
                    "asctime": "@timestamp",
                    "levelname": "level",
                    "name": "logger",
                },
            )
        )
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    logger = structlog.get_logger(__name__)
    logger.info(
        "logging_configured",
        log_level=settings.log_level,
        app_env=settings.app_env,
    )


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name

    Returns:
        Any: Structured logger
    """
    return structlog.get_logger(name)
