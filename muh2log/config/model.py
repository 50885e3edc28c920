from __future__ import annotations

import codecs
from collections.abc import Mapping
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import (
    DEFAULT_ENCODING,
    DEFAULT_FALLBACK_ENCODING,
    ENCODING_ENV,
    FALLBACK_ENCODING_ENV,
    MAX_LINE_LENGTH,
    _get_env_str,
)


class ParserSettings(BaseModel):
    """Settings for reading and classifying a single muh2 log file.

    Attributes:
        log_date: Calendar day the log covers. When unset the reader tries
            to derive it from the log filename.
        encoding: Primary encoding used to decode raw lines; defaults to
            MUH2LOG_ENCODING or utf-8.
        fallback_encoding: Encoding used when a line fails to decode.
        max_line_length: Normalized lines are truncated to this length.
        debug: Force DEBUG logging regardless of the environment.
    """

    model_config = ConfigDict(validate_default=True)

    log_date: date | None = None
    encoding: str = Field(
        default_factory=lambda: _get_env_str(ENCODING_ENV, DEFAULT_ENCODING)
    )
    fallback_encoding: str = Field(
        default_factory=lambda: _get_env_str(
            FALLBACK_ENCODING_ENV, DEFAULT_FALLBACK_ENCODING
        )
    )
    max_line_length: int = Field(default=MAX_LINE_LENGTH, gt=0)
    debug: bool = False

    @field_validator("encoding", "fallback_encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings Python has no codec for; store the canonical name."""
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ParserSettings:
        return cls.model_validate(dict(data))

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True, mode="json")
