"""Wire-level error hierarchy.

Parsing never raises; these exceptions belong to the framing layer, where a
line is checked against the protocol limits before it reaches a transport.

All exceptions accept optional context parameters for error tracking.
"""

from __future__ import annotations


class WireError(Exception):
    """Base exception for all wire-level errors.

    Args:
        message (str): Error message.
        line (str | None): The offending line, without CR/LF.
        operation_type (str | None): Operation that failed (e.g., 'encode', 'feed').

    Example:
        >>> raise WireError("Bad line", line="PING", operation_type="encode")
    """

    def __init__(
        self,
        message: str,
        line: str | None = None,
        operation_type: str | None = None,
    ) -> None:
        super().__init__(message)
        self.line = line
        self.operation_type = operation_type


class LineTooLongError(WireError):
    """Raised when a line exceeds the protocol length limit.

    Args:
        message (str): Error message.
        length (int): Encoded length of the line content in bytes.
        limit (int): The limit that was exceeded.
        line (str | None): The offending line.
        operation_type (str | None): Operation that failed.
    """

    def __init__(
        self,
        message: str,
        length: int,
        limit: int,
        line: str | None = None,
        operation_type: str | None = None,
    ) -> None:
        super().__init__(message, line=line, operation_type=operation_type)
        self.length = length
        self.limit = limit


class EncodingError(WireError):
    """Raised when a line cannot be represented in the configured encoding."""

    pass
