import importlib

import ircwire.constants
from ircwire.constants import _get_env_encoding, _get_env_int


def test_get_env_int_valid_positive_integer(monkeypatch):
    monkeypatch.setenv("TEST_VAR", "123")
    assert _get_env_int("TEST_VAR", 999) == 123


def test_get_env_int_invalid_string(monkeypatch, capsys):
    monkeypatch.setenv("TEST_VAR", "abc")
    assert _get_env_int("TEST_VAR", 999) == 999
    assert "Invalid integer value for TEST_VAR" in capsys.readouterr().out


def test_get_env_int_unset(monkeypatch):
    monkeypatch.delenv("TEST_VAR", raising=False)
    assert _get_env_int("TEST_VAR", 7) == 7


def test_get_env_encoding_normalises_name(monkeypatch):
    monkeypatch.setenv("TEST_ENC", "UTF8")
    assert _get_env_encoding("TEST_ENC", "ascii") == "utf-8"


def test_get_env_encoding_unknown_codec(monkeypatch, capsys):
    monkeypatch.setenv("TEST_ENC", "no-such-codec")
    assert _get_env_encoding("TEST_ENC", "utf-8") == "utf-8"
    assert "Unknown encoding" in capsys.readouterr().out


def test_module_constants_follow_environment(monkeypatch):
    monkeypatch.setenv("IRC_FRAMER_MAX_BUFFER_CHARS", "1024")
    monkeypatch.setenv("IRC_LINE_ENCODING", "latin-1")
    try:
        module = importlib.reload(ircwire.constants)
        assert module.IRC_FRAMER_MAX_BUFFER_CHARS == 1024
        assert module.IRC_LINE_ENCODING == "iso8859-1"
    finally:
        monkeypatch.undo()
        importlib.reload(ircwire.constants)
