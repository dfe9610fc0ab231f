"""
Structured logging helpers.

Every ``extra`` value passes through safe_log_value first, so hero models,
httpx URLs and long payloads end up as short, printable strings on the
log record instead of breaking formatters.

Dependencies: logging (stdlib), pydantic
System role: Logging helper functions used by stores and services
"""

import logging
from typing import Any

from pydantic import BaseModel

# LogRecord attributes that an ``extra`` key must not overwrite.
_RESERVED = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Render a value for a log record.

    Models are rendered by their fields, sequences and mappings by their
    size, everything else by str().

    Args:
        value: Value to render
        max_length: Length after which the text is cut

    Returns:
        str: Printable representation
    """
    if value is None:
        return "None"
    if isinstance(value, BaseModel):
        fields = ", ".join(f"{k}={v!r}" for k, v in value.model_dump().items())
        text = f"{type(value).__name__}({fields})"
    elif isinstance(value, (list, tuple, set)):
        text = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        text = f"dict({len(value)} keys)"
    else:
        try:
            text = str(value)
        except Exception as e:
            return f"<unprintable {type(value).__name__}: {type(e).__name__}>"

    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def _context(context: dict[str, Any]) -> dict[str, str]:
    return {
        (f"ctx_{key}" if key in _RESERVED else key): safe_log_value(val)
        for key, val in context.items()
    }


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with its context attached as record attributes.

    Keys that collide with LogRecord attributes get a ``ctx_`` prefix.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Values attached to the record
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context: Any,
) -> None:
    """
    Log a failure at ERROR with its traceback and context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception being reported
        **context: Values attached to the record
    """
    extra = _context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = str(exc)
    logger.error(message, exc_info=exc, extra=extra)
