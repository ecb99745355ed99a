"""
Configuration constants for ircwire.

Each constant can be overridden by setting an environment variable with the
same name. Protocol limits (such as the 510-byte line ceiling) are fixed and
live with the message model instead.
"""

import codecs
import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    If the variable is not set or cannot be parsed, prints a warning and
    returns the default value.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_encoding(name: str, default: str) -> str:
    """Retrieve a codec name from an environment variable, falling back on unknown codecs."""
    value = os.getenv(name)
    if value:
        try:
            return codecs.lookup(value).name
        except LookupError:
            print(
                f"Warning: Unknown encoding for {name}='{value}', using default {default}"
            )
    return default


# Text encoding used to decode received bytes and encode outgoing lines
IRC_LINE_ENCODING = _get_env_encoding("IRC_LINE_ENCODING", "utf-8")

# Upper bound on buffered characters that have not yet seen a line delimiter
IRC_FRAMER_MAX_BUFFER_CHARS = _get_env_int("IRC_FRAMER_MAX_BUFFER_CHARS", 8192)
