"""
Structured logging configuration using structlog.

Provides JSON logging with ISO timestamps and stdlib compatibility.
Logs go to stderr so validation results on stdout stay machine-readable.
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.typing import FilteringBoundLogger

# Support both package and standalone modes
try:
    from .settings import settings
except ImportError:
    from settings import settings


def configure_logging(log_level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure structlog with JSON output and stdlib compatibility.

    Args:
        log_level: Override log level from settings
        log_format: Override log format from settings
    """
    config = settings()
    level = log_level or config.log_level
    format_type = log_format or config.log_format

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level),
    )
    # basicConfig is a no-op once handlers exist, so apply overrides directly
    logging.getLogger().setLevel(getattr(logging, level))

    processors = [
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.contextvars.merge_contextvars,

        # Add service metadata
        lambda _, __, event_dict: {
            **event_dict,
            "service": config.service_name,
            "environment": config.environment,
        },
    ]

    if format_type == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Development-friendly format
        processors.append(structlog.dev.ConsoleRenderer(colors=not config.is_production()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level)
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> FilteringBoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (defaults to caller's module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_validation_batch(
    logger: FilteringBoundLogger,
    batch_id: str,
    items_valid: int,
    items_invalid: int = 0,
    duration_ms: Optional[float] = None,
    **extra_context
) -> None:
    """
    Log the outcome of validating a batch of identifiers.

    Args:
        logger: Logger instance
        batch_id: Unique batch identifier
        items_valid: Number of identifiers that passed validation
        items_invalid: Number of identifiers that failed validation
        duration_ms: Processing duration in milliseconds
        **extra_context: Additional context to include
    """
    total = items_valid + items_invalid
    context = {
        "batch_id": batch_id,
        "items_processed": total,
        "items_valid": items_valid,
        "items_invalid": items_invalid,
        "success_rate": round(items_valid / total * 100, 2) if total > 0 else 0,
        **extra_context
    }

    if duration_ms is not None:
        context["duration_ms"] = round(duration_ms, 2)

    if items_invalid > 0:
        logger.warning("Validation batch completed with invalid identifiers", **context)
    else:
        logger.info("Validation batch completed successfully", **context)


def _initialize_logging():
    """Initialize logging configuration on module import."""
    # Skip initialization during pytest
    if "pytest" not in sys.modules:
        configure_logging()


_initialize_logging()
