import pytest

from ircwire.irc.message import Message


@pytest.fixture(autouse=True)
def _concise_logging(monkeypatch):
    """Keep log output in the concise format unless a test opts into DEBUG."""
    monkeypatch.delenv("DEBUG", raising=False)


@pytest.fixture
def full_message() -> Message:
    """A message with every field present."""
    return Message(
        prefix="irc.server",
        command="NOTICE",
        parameters=["user"],
        last_parameter="Hello there",
    )
