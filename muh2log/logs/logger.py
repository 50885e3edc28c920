"""Structured event logger used by the reader and classifier."""

from __future__ import annotations

import logging
import os


class ParserLogger:
    def __init__(self, name: str = "muh2log") -> None:
        # Fixed width for event name column when in debug (alignment)
        self._event_name_width = 32
        self.logger = logging.getLogger(name)
        # Set from settings.debug; the DEBUG env var enables it as well
        self.debug_format = False

    def enable_debug_format(self, enabled: bool = True) -> None:
        self.debug_format = enabled

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        **kwargs: object,
    ) -> None:
        event_name = f"{domain}_{action}".lower()
        human_text = human
        derived = False
        if human_text is None:
            # Local import to avoid cyclic import issues during module init.
            from .event_catalog import EVENT_TEMPLATES as _event_templates

            template = _event_templates.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
                derived = True
        if human_text is not None:
            kwargs.setdefault("_human_text", human_text)
        if derived:
            kwargs.setdefault("derived", True)
        self._log(level, event_name, **kwargs)

    def _log(self, level: int, event_name: str, **kwargs: object) -> None:
        if not self.logger.isEnabledFor(level):
            return
        kw: dict[str, object] = dict(kwargs)  # copy for mutation in extract
        source, line_number, human_text = self._extract_reserved(kw)
        prefix = self._build_prefix(source, line_number)
        msg = (
            self._build_debug_message(event_name, prefix, human_text, kw)
            if self._is_debug_enabled()
            else self._build_concise_message(event_name, prefix, human_text)
        )
        self.logger.log(level, msg)

    def _is_debug_enabled(self) -> bool:
        if self.debug_format:
            return True
        return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")

    @staticmethod
    def _extract_reserved(
        kwargs: dict[str, object],
    ) -> tuple[str | None, int | None, str | None]:
        source_o = kwargs.pop("source", None)
        line_o = kwargs.get("line_number")
        human_text_o = kwargs.pop("_human_text", None) or kwargs.get("human")
        kwargs.pop("human", None)
        source = str(source_o) if isinstance(source_o, str) else None
        line_number = line_o if isinstance(line_o, int) else None
        human_text = str(human_text_o) if isinstance(human_text_o, str) else None
        return source, line_number, human_text

    @staticmethod
    def _build_prefix(source: str | None, line_number: int | None) -> str:
        label = source or "muh2log"
        core = f"{label}:{line_number}" if line_number is not None else label
        padded = core.ljust(24)[:24]
        return f"[{padded}]"

    def _build_debug_message(
        self,
        event_name: str,
        prefix: str,
        human_text: str | None,
        kwargs: dict[str, object],
    ) -> str:
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        width = self._event_name_width
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:  # truncate but keep rightmost indicator
            ev = event_name[: width - 1] + "…"
        base = f"{ev} {prefix}"
        if human_text:
            base = f"{base} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base

    @staticmethod
    def _build_concise_message(
        event_name: str, prefix: str, human_text: str | None
    ) -> str:
        core = human_text or event_name
        return f"{prefix} {core}"


logger = ParserLogger()
