"""IRC wire message model: parse a protocol line and render it back.

Grammar handled (RFC 2812 section 2.3.1, without the CR/LF delimiter)::

    [":" prefix SPACE] command *( SPACE parameter ) [SPACE ":" trailing]

The parser only establishes syntactic structure; it never validates commands
or parameter counts and never raises on malformed input.
"""

from __future__ import annotations

import logging

from ..logs.logger import logger
from .message_type import MessageType

# Maximum IRC message length without the CR/LF delimiter (RFC 2813 section 3.3).
MAX_LENGTH = 510

MSG_SEPARATOR = " "
PREFIX_IDENTIFIER = ":"


class Message:
    """A single IRC protocol message.

    Fields are plain attributes so outgoing messages can be built up one
    field at a time. ``None`` always means "absent" and is kept distinct from
    an empty value: ``parameters`` stays ``None`` until the first
    :meth:`add_parameter`, and an empty ``last_parameter`` is still written
    to the wire as a bare ``:``.
    """

    __slots__ = ("prefix", "command", "parameters", "last_parameter")

    def __init__(
        self,
        command: str | None = None,
        parameters: list[str] | None = None,
        last_parameter: str | None = None,
        prefix: str | None = None,
    ) -> None:
        self.prefix = prefix
        self.command = command
        self.parameters = list(parameters) if parameters is not None else None
        self.last_parameter = last_parameter

    @classmethod
    def parse_from(cls, line: str | None) -> Message | None:
        """Create a Message from an IRC line, or return None for a blank line."""
        if line is None or not line.strip():
            logger.log_event("parse", "blank_line", level=logging.DEBUG)
            return None

        msg = cls()
        parts = _tokenize(line)
        if len(parts) == 1:
            msg.command = parts[0]
        else:
            msg._apply_tokens(parts)
        logger.log_event(
            "parse",
            "message",
            level=logging.DEBUG,
            line=line,
            command=msg.command,
            parameters=msg.parameter_size,
        )
        return msg

    def _apply_tokens(self, parts: list[str]) -> None:
        index = 0
        first = parts[index]
        index += 1
        if first.startswith(PREFIX_IDENTIFIER):
            self.prefix = first[1:]
            self.command = parts[index]
            index += 1
        else:
            self.command = first

        remaining = parts[index:]
        for position, part in enumerate(remaining):
            if part.startswith(PREFIX_IDENTIFIER):
                trailing = [part[1:], *remaining[position + 1 :]]
                self.last_parameter = MSG_SEPARATOR.join(trailing)
                break
            self.add_parameter(part)

    def to_wire_line(self) -> str:
        """Render the message as a protocol line without the trailing CR/LF."""
        fields: list[str] = []
        if self.prefix is not None:
            fields.append(PREFIX_IDENTIFIER + self.prefix)
        if self.command is not None:
            fields.append(self.command)
        if self.parameters:
            fields.extend(self.parameters)

        line = MSG_SEPARATOR.join(fields)
        if self.last_parameter is not None:
            line = f"{line}{MSG_SEPARATOR}{PREFIX_IDENTIFIER}{self.last_parameter}"
        return line

    def add_parameter(self, parameter: str) -> None:
        if self.parameters is None:
            self.parameters = []
        self.parameters.append(parameter)

    @property
    def parameter_size(self) -> int:
        return 0 if self.parameters is None else len(self.parameters)

    @property
    def message_type(self) -> MessageType:
        """Symbolic type of ``command``; ``UNKNOWN`` when unset or not an IRC command."""
        return MessageType.from_command(self.command)

    @message_type.setter
    def message_type(self, msg_type: MessageType) -> None:
        # Overwrites the command field.
        self.command = msg_type.command

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Message):
            return NotImplemented
        # Every field must be present on this side; absent fields never match.
        return (
            self.prefix is not None
            and self.prefix == other.prefix
            and self.command is not None
            and self.command == other.command
            and self.parameters is not None
            and self.parameters == other.parameters
            and self.last_parameter is not None
            and self.last_parameter == other.last_parameter
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_wire_line()

    def __repr__(self) -> str:
        return (
            f"Message(prefix={self.prefix!r}, command={self.command!r}, "
            f"parameters={self.parameters!r}, last_parameter={self.last_parameter!r})"
        )


def _tokenize(line: str) -> list[str]:
    # Consecutive separators yield empty tokens; trailing empty tokens are dropped.
    parts = line.split(MSG_SEPARATOR)
    while len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return parts


def parse_from(line: str | None) -> Message | None:
    return Message.parse_from(line)


def to_wire_line(message: Message) -> str:
    return message.to_wire_line()


def get_message_type(message: Message) -> MessageType:
    return message.message_type


def set_message_type(message: Message, msg_type: MessageType) -> None:
    message.message_type = msg_type


__all__ = [
    "MAX_LENGTH",
    "MSG_SEPARATOR",
    "PREFIX_IDENTIFIER",
    "Message",
    "parse_from",
    "to_wire_line",
    "get_message_type",
    "set_message_type",
]
