"""
Observability Infrastructure

Structured logging and store operation metrics. Store failures that the
timetable recovers from locally are reported here rather than raised.
"""

import logging
import sys
from typing import Any

import structlog
from prometheus_client import Counter, Histogram

from .config import Settings

DATABASE_OPERATIONS = Counter(
    "timetable_database_operations_total",
    "Store adapter operations",
    ["operation", "outcome"],
)

DATABASE_DURATION = Histogram(
    "timetable_database_operation_duration_seconds",
    "Store adapter operation duration",
    ["operation"],
)


def setup_structured_logging(settings: Settings) -> None:
    """Configure structured logging for the process."""

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=settings.ENVIRONMENT == "local")
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    if settings.LOG_SQL:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
    else:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def log_database_operation(
    operation: str,
    duration_seconds: float,
    success: bool,
    **metadata: Any,
) -> None:
    """Record one store adapter call."""
    outcome = "success" if success else "failure"
    DATABASE_OPERATIONS.labels(operation=operation, outcome=outcome).inc()
    DATABASE_DURATION.labels(operation=operation).observe(duration_seconds)

    get_logger("database").debug(
        "Database operation completed",
        operation=operation,
        outcome=outcome,
        duration_seconds=duration_seconds,
        **metadata,
    )
