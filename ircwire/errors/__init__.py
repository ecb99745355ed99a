"""Error types raised by the wire layer."""

from .handling import log_error  # noqa: F401
from .wire import EncodingError, LineTooLongError, WireError  # noqa: F401

__all__ = ["log_error", "WireError", "LineTooLongError", "EncodingError"]
