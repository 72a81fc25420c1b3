"""
Centralized logging configuration for the BOM trend engine.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the package should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import TYPE_CHECKING, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

if TYPE_CHECKING:
    from ..config.defaults import LoggingParams


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

    # structlog renders the message, stdlib only routes it
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"
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


def get_attribution_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for component attribution.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger with the attribution subsystem bound
    """
    return get_logger(name).bind(subsystem="attribution")


def get_projection_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound for price projections."""
    return get_logger(name).bind(subsystem="projection")


def log_data_quality_issue(
    logger: FilteringBoundLogger,
    issue: str,
    module_name: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a data quality issue with standardized format.

    Data quality issues never stop a computation; they explain why a
    component reads as unavailable or why a figure may be misleading.

    Args:
        logger: Structlog logger instance
        issue: Short machine-readable issue name (e.g. "chip_unresolved")
        module_name: Module the issue was found on, if any
        context: Additional context data
    """
    bound_logger = logger.bind(
        issue=issue,
        module_name=module_name,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.warning("Data quality issue")


def configure_logging_from_params(params: "LoggingParams") -> None:
    """Configure logging from the ``logging`` section of the engine config."""
    configure_logging(level=params.level, format_json=params.format_json)
