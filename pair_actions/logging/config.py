"""
Centralized logging configuration for pair actions.

All package modules log through structlog using the configuration set up
here. Libraries should not call ``configure_logging`` on import; applications
and tests call it once at startup.
"""
import logging
import sys
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
    Configure structlog for the whole package.

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
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def get_chain_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the action chaining subsystem."""
    return get_logger(name).bind(subsystem="chain")


def log_action_step(
    logger: FilteringBoundLogger,
    action_name: str,
    step: int,
    total: int,
    error: Optional[BaseException] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log one step of a sequenced action with standardized fields.

    Successful steps are logged at DEBUG, failing steps at WARNING.

    Args:
        logger: Structlog logger instance
        action_name: Name of the action that ran
        step: 1-based position of the action in its sequence
        total: Number of actions in the sequence
        error: Exception raised by the step, if any
        context: Additional context data
    """
    bound_logger = logger.bind(
        action=action_name,
        step=step,
        total_steps=total,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if error is None:
        bound_logger.debug("Action step completed")
    else:
        bound_logger.warning(
            "Action step failed, skipping remaining steps",
            error_type=type(error).__name__,
            skipped=total - step,
        )
