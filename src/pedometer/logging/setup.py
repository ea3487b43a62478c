"""
Structured logging for the CLI and the HTTP service.

Everything goes to stderr so a JSON summary printed on stdout stays parseable.
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.types import Processor

from pedometer.config import Settings


def service_context(settings: Settings) -> Processor:
    """Processor stamping every event with the service name and environment."""

    def add_service_context(logger, method_name, event_dict):
        event_dict.setdefault("service", settings.service_name)
        event_dict.setdefault("environment", settings.environment)
        return event_dict

    return add_service_context


def renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(
    service_name: str = "pedometer",
    settings: Optional[Settings] = None,
) -> structlog.stdlib.BoundLogger:
    """
    Route structlog through stdlib logging at the configured level.

    Returns:
        Logger bound to ``service_name``
    """
    if settings is None:
        settings = Settings(service_name=service_name)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.log_level.upper()),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            service_context(settings),
            renderer(settings.log_format),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger(service_name)
