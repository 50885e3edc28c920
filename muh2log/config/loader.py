"""Settings loading utilities."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..constants import CONFIG_FILE_ENV
from ..errors import ConfigError
from ..logs import logger
from .model import ParserSettings


def read_config_file(path: str | os.PathLike[str]) -> dict[str, Any]:
    """Read a JSON settings file.

    A missing file yields an empty mapping; anything else that prevents
    reading a JSON object raises ConfigError.
    """
    p = Path(path)
    try:
        with p.open(encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.log_event("config", "file_missing", path=str(p))
        return {}
    except (OSError, ValueError) as e:
        raise ConfigError(
            f"Cannot read config file {p}", data={"path": str(p), "reason": str(e)}
        ) from e
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {p} must contain a JSON object", data={"path": str(p)}
        )
    return data


def _env_debug() -> bool | None:
    raw = os.environ.get("DEBUG")
    if raw is None:
        return None
    return raw.lower() in ("true", "1", "yes")


def load_settings(
    config_file: str | os.PathLike[str] | None = None, **overrides: Any
) -> ParserSettings:
    """Build validated settings from file, environment and explicit overrides.

    Precedence, lowest first: JSON config file (``config_file`` or the
    ``MUH2LOG_CONF_FILE`` environment variable), ``DEBUG`` environment
    variable, then keyword overrides whose value is not None.

    Raises:
        ConfigError: If the file is unreadable or the merged values are invalid.
    """
    path = config_file or os.environ.get(CONFIG_FILE_ENV)
    merged: dict[str, Any] = read_config_file(path) if path else {}

    env_debug = _env_debug()
    if env_debug is not None:
        merged["debug"] = env_debug

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        settings = ParserSettings.from_dict(merged)
    except ValidationError as e:
        raise ConfigError(
            "Invalid settings", data={"errors": e.error_count(), "detail": str(e)}
        ) from e

    logger.log_event(
        "config",
        "loaded",
        encoding=settings.encoding,
        log_date=settings.log_date,
    )
    return settings
