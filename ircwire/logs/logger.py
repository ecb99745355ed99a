"""Event logger for the wire layer."""

from __future__ import annotations

import logging
import os

from .event_catalog import EVENT_TEMPLATES


class WireLogger:
    # Fixed width for the event name column in debug output.
    EVENT_NAME_WIDTH = 32
    SOURCE_WIDTH = 16
    LINE_PREVIEW = 80

    def __init__(self, name: str = "ircwire") -> None:
        self.logger = logging.getLogger(name)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        event_name = f"{domain}_{action}".lower()
        human_text = human
        derived = False
        if human_text is None:
            template = EVENT_TEMPLATES.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
                derived = True
        if derived:
            kwargs.setdefault("derived", True)
        self._log(level, event_name, human_text, exc_info=exc_info, **kwargs)

    def _log(
        self,
        level: int,
        event_name: str,
        human_text: str,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        kw: dict[str, object] = dict(kwargs)
        source, line = self._extract_reserved(kw)
        prefix = self._build_prefix(source)
        msg = (
            self._build_debug_message(event_name, prefix, human_text, line, kw)
            if self._is_debug_enabled()
            else f"{prefix} {human_text}"
        )
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _is_debug_enabled() -> bool:
        return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")

    @classmethod
    def _extract_reserved(cls, kwargs: dict[str, object]) -> tuple[str | None, str | None]:
        source_o = kwargs.pop("source", None)
        line_o = kwargs.pop("line", None)
        source = source_o if isinstance(source_o, str) else None
        line = line_o if isinstance(line_o, str) else None
        if line is not None and len(line) > cls.LINE_PREVIEW:
            line = line[: cls.LINE_PREVIEW - 1] + "…"
        return source, line

    @classmethod
    def _build_prefix(cls, source: str | None) -> str:
        padded = (source or "wire").ljust(cls.SOURCE_WIDTH)[: cls.SOURCE_WIDTH]
        return f"[{padded}]"

    @classmethod
    def _build_debug_message(
        cls,
        event_name: str,
        prefix: str,
        human_text: str,
        line: str | None,
        kwargs: dict[str, object],
    ) -> str:
        width = cls.EVENT_NAME_WIDTH
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:  # truncate but keep rightmost indicator
            ev = event_name[: width - 1] + "…"
        base = f"{ev} {prefix} {human_text}"
        if line is not None:
            base = f"{base} | {line!r}"
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        if context:
            base = f"{base} ({context})"
        return base


logger = WireLogger()
