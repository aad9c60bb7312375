"""
Centralized logging configuration for datefaker.

This module provides standardized logging configuration using structlog.
Library modules obtain loggers through ``structlog.get_logger(__name__)``;
applications embedding the library call ``configure_logging`` once to pick
a renderer and level.
"""
import logging
import sys
from datetime import datetime
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_generation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the date generation subsystem.

    The logger stays a lazy proxy so a later configure_logging call still
    decides its level and renderer.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for generation events
    """
    return structlog.get_logger(name, subsystem="date_generation")


def log_generation(
    logger: FilteringBoundLogger,
    builder: str,
    start: datetime,
    end: datetime,
    result: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log one generated instant with standardized fields.

    Args:
        logger: Structlog logger instance
        builder: Name of the constraint builder that produced the interval
        start: Inclusive interval start
        end: Exclusive interval end
        result: Rendered output handed back to the caller
        context: Additional context data (builder arguments)
    """
    # Per-draw events are only emitted once the application configured logging
    if not structlog.is_configured():
        return

    bound_logger = logger.bind(
        builder=builder,
        interval_start=start.isoformat(),
        interval_end=end.isoformat(),
        result=result,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Date generated")
