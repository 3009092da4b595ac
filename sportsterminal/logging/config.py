"""
Centralized logging configuration for sportsterminal.

This module provides standardized logging configuration using structlog
for all components. The curses UI owns the terminal while it runs, so in
interactive mode log records are routed to a file instead of a stream.
"""
import logging
import sys
from pathlib import Path
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        log_file: Write records to this file instead of a stream
        stream: Stream to write to when no file is given (default stderr)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    if log_file:
        Path(log_file).expanduser().parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            level=log_level,
            filename=str(Path(log_file).expanduser()),
            format="%(message)s"
        )
    else:
        logging.basicConfig(
            level=log_level,
            stream=stream or sys.stderr,
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

    # No ANSI colors in files
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=log_file is None))

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


def get_api_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the API subsystem."""
    # Must stay lazy until configure_logging() has run
    return structlog.get_logger(name, subsystem="api")


def get_ui_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the UI subsystem."""
    return structlog.get_logger(name, subsystem="ui")


def log_api_request(
    logger: FilteringBoundLogger,
    url: str,
    status: Optional[int],
    attempt: int,
    elapsed_ms: int,
    error: Optional[str] = None
) -> None:
    """
    Log an API request outcome with standardized format.

    Args:
        logger: Structlog logger instance
        url: Requested URL
        status: HTTP status code, None if no response was received
        attempt: 1-based attempt number
        elapsed_ms: Round trip time in milliseconds
        error: Error description for failed attempts
    """
    bound_logger = logger.bind(
        url=url,
        status=status,
        attempt=attempt,
        elapsed_ms=elapsed_ms,
    )

    if error is None:
        bound_logger.info("API request completed")
    else:
        bound_logger.warning("API request failed", error=error)


def log_view_transition(
    logger: FilteringBoundLogger,
    from_view: str,
    to_view: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a navigation change between views.

    Args:
        logger: Structlog logger instance
        from_view: View before the key press
        to_view: View after the key press
        trigger: Key or message that caused the change
        context: Additional context data
    """
    bound_logger = logger.bind(
        from_view=from_view,
        to_view=to_view,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("View transition")
