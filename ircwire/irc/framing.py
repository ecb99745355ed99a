"""CR/LF line framing on top of the message model.

The framer owns no socket: a transport feeds it whatever it received and gets
back parsed messages, and asks it to encode outgoing messages. This is where
``MAX_LENGTH`` is applied.
"""

from __future__ import annotations

import codecs
import logging

from ..constants import IRC_FRAMER_MAX_BUFFER_CHARS, IRC_LINE_ENCODING
from ..errors import EncodingError, LineTooLongError
from ..logs.logger import logger
from .message import MAX_LENGTH, Message

LINE_DELIMITER = "\r\n"


def split_lines(buffer: str) -> tuple[list[str], str]:
    """Split ``buffer`` into complete lines and the unterminated remainder."""
    lines: list[str] = []
    while LINE_DELIMITER in buffer:
        line, buffer = buffer.split(LINE_DELIMITER, 1)
        lines.append(line)
    return lines, buffer


class LineFramer:
    def __init__(
        self,
        encoding: str = IRC_LINE_ENCODING,
        max_buffer: int = IRC_FRAMER_MAX_BUFFER_CHARS,
    ) -> None:
        self.encoding = encoding
        self.max_buffer = max_buffer
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._buffer = ""
        # Set after an overflow until the rest of the dropped line has gone by.
        self._discarding = False

    @property
    def pending(self) -> str:
        return self._buffer

    def reset(self) -> None:
        self._buffer = ""
        self._discarding = False
        self._decoder.reset()

    def feed(self, data: str | bytes) -> list[Message]:
        """Buffer received data and return the messages of every completed line."""
        if isinstance(data, bytes):
            data = self._decoder.decode(data)
        data = self._buffer + data
        if self._discarding:
            if LINE_DELIMITER not in data:
                # A CR at the end may be the first half of the delimiter.
                self._buffer = "\r" if data.endswith("\r") else ""
                return []
            data = data.split(LINE_DELIMITER, 1)[1]
            self._discarding = False
        lines, self._buffer = split_lines(data)

        if len(self._buffer) > self.max_buffer:
            logger.log_event(
                "framing",
                "buffer_overflow",
                level=logging.WARNING,
                length=len(self._buffer),
                limit=self.max_buffer,
            )
            self._buffer = ""
            self._discarding = True

        messages: list[Message] = []
        for line in lines:
            length = self._encoded_length(line)
            if length > MAX_LENGTH:
                logger.log_event(
                    "framing",
                    "line_too_long",
                    level=logging.WARNING,
                    line=line,
                    length=length,
                    limit=MAX_LENGTH,
                )
                continue
            msg = Message.parse_from(line)
            if msg is not None:
                messages.append(msg)
        return messages

    def encode(self, message: Message) -> bytes:
        """Serialize ``message`` into a CR/LF terminated line ready for the transport."""
        line = message.to_wire_line()
        # One encoder for line and delimiter so stateful codecs emit a single BOM.
        encoder = codecs.getincrementalencoder(self.encoding)()
        try:
            payload = encoder.encode(line)
            delimiter = encoder.encode(LINE_DELIMITER, final=True)
        except UnicodeEncodeError as e:
            logger.log_event(
                "framing",
                "encode_failed",
                level=logging.WARNING,
                line=line,
                command=message.command,
                error=str(e),
            )
            raise EncodingError(
                f"Line cannot be encoded as {self.encoding}",
                line=line,
                operation_type="encode",
            ) from e
        if len(payload) > MAX_LENGTH:
            raise LineTooLongError(
                f"Line is {len(payload)} bytes, limit is {MAX_LENGTH}",
                length=len(payload),
                limit=MAX_LENGTH,
                line=line,
                operation_type="encode",
            )
        return payload + delimiter

    def _encoded_length(self, line: str) -> int:
        return len(line.encode(self.encoding, errors="replace"))


__all__ = ["LINE_DELIMITER", "LineFramer", "split_lines"]
