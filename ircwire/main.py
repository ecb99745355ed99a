#!/usr/bin/env python3
"""
Command line entry point: parse IRC lines from stdin and echo them back.

Each non-blank input line is parsed and written to stdout either
re-serialized (the default) or as a JSON object of its fields.
"""

import argparse
import json
import logging
import sys
from typing import TextIO

from .errors import log_error
from .irc import Message
from .logging_config import LoggerConfigurator
from .logs import logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ircwire", description="Parse IRC protocol lines read from stdin."
    )
    parser.add_argument(
        "--json", action="store_true", help="emit parsed fields as JSON objects"
    )
    parser.add_argument(
        "--types",
        action="store_true",
        help="include the symbolic message type (implies --json)",
    )
    return parser


def message_to_dict(msg: Message, include_type: bool = False) -> dict:
    fields = {
        "prefix": msg.prefix,
        "command": msg.command,
        "parameters": msg.parameters,
        "last_parameter": msg.last_parameter,
    }
    if include_type:
        fields["type"] = msg.message_type.name
    return fields


def process_lines(
    lines: TextIO, out: TextIO, as_json: bool = False, include_type: bool = False
) -> tuple[int, int]:
    """Parse every line of ``lines`` and write the result to ``out``.

    Returns:
        (processed, skipped) counts.
    """
    processed = skipped = 0
    for raw in lines:
        msg = Message.parse_from(raw.rstrip("\r\n"))
        if msg is None:
            skipped += 1
            continue
        processed += 1
        if as_json or include_type:
            out.write(json.dumps(message_to_dict(msg, include_type)) + "\n")
        else:
            out.write(msg.to_wire_line() + "\n")
    return processed, skipped


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        logger.log_event("cli", "start", level=logging.DEBUG)
        processed, skipped = process_lines(
            sys.stdin, sys.stdout, as_json=args.json, include_type=args.types
        )
        logger.log_event(
            "cli", "done", level=logging.DEBUG, count=processed, skipped=skipped
        )
    except KeyboardInterrupt:
        logger.log_event("cli", "interrupted", level=logging.WARNING)
    except Exception as e:
        log_error("Line processing error", e)
        return 1
    return 0


def run() -> None:
    """Synchronous entry point for the console script."""
    LoggerConfigurator().configure()
    sys.exit(main())


if __name__ == "__main__":
    run()
