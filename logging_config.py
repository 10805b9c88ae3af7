"""Structured logging configuration for the mutation probe"""
import logging
import os
import sys
from typing import Any, Dict, Iterable
import structlog
from structlog.stdlib import LoggerFactory
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, StackInfoRenderer
from config import Config


def _processors(renderer) -> list:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        TimeStamper(fmt="iso"),
        StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def setup_structured_logging(config: Config) -> None:
    """Setup structured logging with JSON format for production and console for development"""

    # Use JSON renderer for production, console for development
    is_development = os.getenv("ENVIRONMENT", "production").lower() == "development"
    renderer = ConsoleRenderer() if is_development else JSONRenderer()

    structlog.configure(
        processors=_processors(renderer),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, config.log_level.upper())

    handlers = []

    # File handler
    if config.log_file is not None:
        file_handler = logging.FileHandler(str(config.log_file))
        file_handler.setLevel(level)
        handlers.append(file_handler)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    handlers.append(console_handler)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=handlers,
        force=True
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Until ``setup_structured_logging`` runs (or the host application
    configures structlog itself), events are routed through the standard
    library logger of the same name, so the host's logging levels and
    handlers decide what is emitted.
    """
    if not structlog.is_configured():
        structlog.configure(
            processors=_processors(JSONRenderer()),
            wrapper_class=structlog.stdlib.BoundLogger,
            logger_factory=LoggerFactory(),
        )
    return structlog.stdlib.get_logger(name)


def log_probe_result(logger: structlog.stdlib.BoundLogger, operations: Iterable[str], attempts: int) -> None:
    """Log a finished probe with structured data"""
    operations = sorted(operations)
    logger.info(
        "Probe completed",
        mutating_operations=operations,
        attempts=attempts,
        immutable=not operations,
        event_type="probe_result"
    )


def log_error(logger: structlog.stdlib.BoundLogger, error: Exception, context: Dict[str, Any] = None) -> None:
    """Log error with structured context"""
    logger.error(
        "Error occurred",
        error=str(error),
        error_type=type(error).__name__,
        context=context or {},
        event_type="error",
        exc_info=True
    )
