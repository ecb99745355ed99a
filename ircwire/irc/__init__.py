"""IRC wire subsystem package.

Contains the message model (parse/serialize), the command type table and the
CR/LF line framer.
"""

from .framing import LINE_DELIMITER, LineFramer, split_lines  # noqa: F401
from .message import (  # noqa: F401
    MAX_LENGTH,
    Message,
    get_message_type,
    parse_from,
    set_message_type,
    to_wire_line,
)
from .message_type import MessageType  # noqa: F401

__all__ = [
    "LINE_DELIMITER",
    "LineFramer",
    "MAX_LENGTH",
    "Message",
    "MessageType",
    "get_message_type",
    "parse_from",
    "set_message_type",
    "split_lines",
    "to_wire_line",
]
