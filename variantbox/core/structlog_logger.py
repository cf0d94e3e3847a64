"""Structlog logger factory and utilities for variantbox."""

from typing import Any

import structlog


def get_struct_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger with the given name.

    Args:
        name: The logger name, usually __name__

    Returns:
        A bound structlog logger instance

    Note: For exception logging with debug stack traces, use this pattern:
        try:
            # some operation
        except Exception as e:
            exc_info = logger.isEnabledFor(logging.DEBUG)
            logger.error("operation_failed", error=str(e), exc_info=exc_info)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]


def get_struct_logger_with_context(
    name: str, **context: Any
) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger with bound context.

    Example:
        logger = get_struct_logger_with_context(__name__, variant="release")
        logger.info("variant_resolved")  # Will include variant in output
    """
    logger = structlog.get_logger(name)
    return logger.bind(**context)  # type: ignore[no-any-return]
