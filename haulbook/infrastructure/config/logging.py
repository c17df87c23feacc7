"""
Logging configuration module.

Console logging in plain text (development) or JSON (production, for log
aggregation via python-json-logger). Every record carries the id of the
request it was emitted for.
"""

import logging
import logging.config
import sys
from contextvars import ContextVar
from typing import Any

from haulbook.infrastructure.config.settings import Settings

NO_REQUEST_ID = "no-request-id"

# Set by RequestIDMiddleware for the duration of a request
request_id_var: ContextVar[str] = ContextVar("request_id", default=NO_REQUEST_ID)


class CorrelationIdFilter(logging.Filter):
    """
    Logging filter to add correlation_id to log records.

    The correlation_id is the current request id, read from a context
    variable; records emitted outside a request get ``no-request-id``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = request_id_var.get()
        return True


def get_logging_config(settings: Settings) -> dict[str, Any]:
    """
    Get logging configuration dictionary.

    Returns:
        Dictionary compatible with logging.config.dictConfig()
    """
    formatter = "json" if settings.log_format == "json" else "detailed"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": (
                    "%(asctime)s - %(name)s - %(levelname)s - "
                    "[%(correlation_id)s] - %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": (
                    "%(asctime)s %(name)s %(levelname)s %(correlation_id)s "
                    "%(filename)s %(lineno)d %(message)s"
                ),
            },
        },
        "filters": {
            "correlation_id": {
                "()": CorrelationIdFilter,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.log_level,
                "formatter": formatter,
                "stream": sys.stdout,
                "filters": ["correlation_id"],
            },
        },
        "root": {
            "level": settings.log_level,
            "handlers": ["console"],
        },
        "loggers": {
            "uvicorn": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
            "uvicorn.access": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
            "sqlalchemy.engine": {
                "level": "INFO" if settings.database_echo else "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
            "haulbook": {
                "level": settings.log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """
    Configure application logging.

    Call this once at application startup, before any logging occurs.
    """
    logging.config.dictConfig(get_logging_config(settings))
    logging.getLogger(__name__).info(
        f"Logging configured: level={settings.log_level}, format={settings.log_format}"
    )
