from __future__ import annotations

import logging

import pytest

from ircwire.errors import EncodingError, LineTooLongError
from ircwire.irc.framing import LineFramer, split_lines
from ircwire.irc.message import MAX_LENGTH, Message


def test_split_lines_keeps_remainder():
    lines, rest = split_lines("PING a\r\nPING b\r\nPIN")
    assert lines == ["PING a", "PING b"]
    assert rest == "PIN"


def test_split_lines_without_delimiter():
    assert split_lines("NICK foo") == ([], "NICK foo")


def test_feed_returns_messages_for_complete_lines():
    framer = LineFramer()
    msgs = framer.feed(":irc.server NOTICE user :Hello there\r\nPING :x\r\n")
    assert [m.command for m in msgs] == ["NOTICE", "PING"]
    assert msgs[0].last_parameter == "Hello there"
    assert framer.pending == ""


def test_feed_buffers_partial_lines_across_calls():
    framer = LineFramer()
    assert framer.feed("PRIVMSG #chan :hel") == []
    assert framer.pending == "PRIVMSG #chan :hel"
    msgs = framer.feed("lo\r")
    assert msgs == []
    msgs = framer.feed("\nNICK")
    assert len(msgs) == 1
    assert msgs[0].last_parameter == "hello"
    assert framer.pending == "NICK"


def test_feed_bytes_with_split_multibyte_character():
    framer = LineFramer()
    payload = "PRIVMSG #chan :café\r\n".encode("utf-8")
    split_at = payload.index("é".encode("utf-8")) + 1
    assert framer.feed(payload[:split_at]) == []
    msgs = framer.feed(payload[split_at:])
    assert msgs[0].last_parameter == "café"


def test_feed_skips_blank_lines():
    framer = LineFramer()
    msgs = framer.feed("\r\n   \r\nPING\r\n")
    assert [m.command for m in msgs] == ["PING"]


def test_feed_drops_over_long_lines(caplog):
    caplog.set_level(logging.WARNING)
    framer = LineFramer()
    too_long = "PRIVMSG #chan :" + "x" * MAX_LENGTH
    msgs = framer.feed(too_long + "\r\nPING\r\n")
    assert [m.command for m in msgs] == ["PING"]
    assert any("Dropped line" in r.message for r in caplog.records)


def test_feed_accepts_line_at_exact_limit():
    framer = LineFramer()
    line = "PRIVMSG #chan :" + "x" * (MAX_LENGTH - len("PRIVMSG #chan :"))
    assert len(line) == MAX_LENGTH
    msgs = framer.feed(line + "\r\n")
    assert len(msgs) == 1


def test_feed_discards_runaway_buffer(caplog):
    caplog.set_level(logging.WARNING)
    framer = LineFramer(max_buffer=16)
    assert framer.feed("x" * 17) == []
    assert framer.pending == ""
    assert any("Discarded 17 unterminated" in r.message for r in caplog.records)


def test_feed_drops_rest_of_overflowed_line():
    framer = LineFramer(max_buffer=16)
    assert framer.feed("PRIVMSG #chan :" + "x" * 40) == []
    assert framer.feed("more of the same") == []
    assert framer.feed("tail of that line\r") == []
    assert framer.pending == "\r"
    msgs = framer.feed("\nPING :next\r\n")
    assert [m.command for m in msgs] == ["PING"]
    assert msgs[0].last_parameter == "next"


def test_feed_overflow_keeps_lines_completed_earlier():
    framer = LineFramer(max_buffer=16)
    msgs = framer.feed("NICK foo\r\n" + "y" * 20)
    assert [m.command for m in msgs] == ["NICK"]
    assert framer.feed("yy\r\nPONG\r\n")[0].command == "PONG"


def test_reset_stops_discarding():
    framer = LineFramer(max_buffer=4)
    framer.feed("x" * 10)
    framer.reset()
    assert [m.command for m in framer.feed("PING\r\n")] == ["PING"]


def test_reset_clears_pending():
    framer = LineFramer()
    framer.feed("NICK fo")
    framer.reset()
    assert framer.pending == ""


def test_encode_appends_delimiter(full_message):
    framer = LineFramer()
    assert framer.encode(full_message) == b":irc.server NOTICE user :Hello there\r\n"


def test_encode_rejects_over_long_line():
    framer = LineFramer()
    msg = Message("PRIVMSG", ["#chan"], "x" * MAX_LENGTH)
    with pytest.raises(LineTooLongError) as excinfo:
        framer.encode(msg)
    assert excinfo.value.limit == MAX_LENGTH
    assert excinfo.value.length > MAX_LENGTH
    assert excinfo.value.operation_type == "encode"


def test_encode_limit_counts_bytes_not_characters():
    framer = LineFramer()
    prefix = "PRIVMSG #chan :"
    msg = Message("PRIVMSG", ["#chan"], "é" * ((MAX_LENGTH - len(prefix)) // 2 + 1))
    with pytest.raises(LineTooLongError):
        framer.encode(msg)


def test_encode_unrepresentable_text_raises_encoding_error():
    framer = LineFramer(encoding="ascii")
    msg = Message("PRIVMSG", ["#chan"], "café")
    with pytest.raises(EncodingError) as excinfo:
        framer.encode(msg)
    assert excinfo.value.line == "PRIVMSG #chan :café"


def test_encoded_line_feeds_back_into_framer(full_message):
    framer = LineFramer()
    msgs = framer.feed(framer.encode(full_message))
    assert msgs == [full_message]


@pytest.mark.parametrize("encoding", ["utf-16", "utf-8-sig"])
def test_encode_with_bom_codec_writes_single_mark(encoding):
    framer = LineFramer(encoding=encoding)
    assert framer.encode(Message("PING", ["x"])) == "PING x\r\n".encode(encoding)
