"""Loads the human-readable log message templates keyed by (domain, action)."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

EVENT_TEMPLATES: dict[tuple[str, str], str] = {}
_JSON_FILENAME = "event_templates.json"


def _load_event_templates(path: Path | None = None) -> dict[tuple[str, str], str]:
    """Read ``{domain: {action: template}}`` from ``path`` or the bundled file.

    A missing or unreadable file yields a single ``("app", "load_error")``
    entry describing the failure instead of raising.
    """
    path = path or Path(__file__).with_name(_JSON_FILENAME)
    templates: dict[tuple[str, str], str] = {}
    try:
        with path.open("r", encoding="utf-8") as f:
            raw: Any = json.load(f)
        if isinstance(raw, Mapping):
            for domain, actions in raw.items():
                if not isinstance(actions, Mapping):
                    continue
                templates.update(
                    ((domain, action), template)
                    for action, template in actions.items()
                    if isinstance(template, str)
                )
    except FileNotFoundError:
        templates[("app", "load_error")] = "Event templates file missing"
    except (OSError, ValueError) as e:
        templates[("app", "load_error")] = f"Failed to load event templates: {e}"[:200]
    return templates


def reload_event_templates(path: Path | None = None) -> None:
    global EVENT_TEMPLATES  # noqa: PLW0603
    EVENT_TEMPLATES = _load_event_templates(path)


reload_event_templates()

__all__ = ["EVENT_TEMPLATES", "reload_event_templates"]
