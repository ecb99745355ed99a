from __future__ import annotations

import logging

from ..logs.logger import logger
from .wire import WireError


def log_error(message: str, error: Exception, context: dict | None = None) -> None:
    """Log ``message`` together with the exception that caused it.

    Wire errors contribute the offending line and operation to the context.
    """
    extra: dict[str, object] = dict(context or {})
    if isinstance(error, WireError):
        if error.line is not None:
            extra.setdefault("line", error.line)
        if error.operation_type is not None:
            extra.setdefault("operation_type", error.operation_type)
    logger.log_event(
        "app",
        "error",
        level=logging.ERROR,
        message=message,
        error=str(error),
        error_type=type(error).__name__,
        **extra,
    )
