"""IRC wire-message model: parse protocol lines and serialize them back."""

from .irc import (  # noqa: F401
    MAX_LENGTH,
    LineFramer,
    Message,
    MessageType,
    get_message_type,
    parse_from,
    set_message_type,
    to_wire_line,
)

__version__ = "0.1.0"

__all__ = [
    "MAX_LENGTH",
    "LineFramer",
    "Message",
    "MessageType",
    "get_message_type",
    "parse_from",
    "set_message_type",
    "to_wire_line",
]
