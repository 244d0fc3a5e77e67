"""
Structured logging helpers for classified errors.

Flatten arbitrary context into log-safe strings and log DocRAGError at a
level chosen by its kind, stamped with kind, retryability, details and
the request correlation id.

Dependencies: logging (stdlib), docrag.core.exceptions
System role: Logging helper functions
"""

import logging
from enum import Enum
from typing import Any

from docrag.core.exceptions import DocRAGError, ErrorKind

_CLIENT_KINDS = frozenset({ErrorKind.VALIDATION, ErrorKind.NO_CONTENT})
_PROVIDER_KINDS = frozenset(
    {ErrorKind.QUOTA_EXCEEDED, ErrorKind.UPSTREAM_UNAVAILABLE, ErrorKind.UPSTREAM_REJECTED}
)


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Convert a context value to a bounded string.

    Enums log their value, collections log their size only.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Log-safe representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, Enum):
            val_str = str(value.value)
        elif isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """Log message with every context value passed through safe_log_value."""
    logger.log(level, message, extra={key: safe_log_value(val) for key, val in context.items()})


def level_for_kind(kind: ErrorKind) -> int:
    """Client mistakes are INFO, provider failures WARNING, the rest ERROR."""
    if kind in _CLIENT_KINDS:
        return logging.INFO
    if kind in _PROVIDER_KINDS:
        return logging.WARNING
    return logging.ERROR


def log_classified_error(
    logger: logging.Logger,
    message: str,
    error: DocRAGError,
    **context: Any,
) -> None:
    """
    Log a DocRAGError at the level its kind calls for.

    The record carries kind, retryable and error_msg plus each detail key
    prefixed with ``detail_``. PERSISTENCE and INTERNAL errors attach the
    traceback.

    Args:
        logger: Logger instance
        message: Log message
        error: Classified error
        **context: Additional context such as path or correlation_id
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra.update({
        "kind": error.kind.value,
        "retryable": error.retryable,
        "error_msg": safe_log_value(error.message),
    })
    for key, val in error.details.items():
        extra[f"detail_{key}"] = safe_log_value(val)

    level = level_for_kind(error.kind)
    logger.log(level, message, exc_info=error if level >= logging.ERROR else None, extra=extra)


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an unclassified exception with traceback and context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context key-value pairs
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    safe_context.update({
        "error_type": type(exc).__name__,
        "error_msg": safe_log_value(str(exc)),
    })
    logger.error(message, exc_info=exc, extra=safe_context)
