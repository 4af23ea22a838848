"""Core settings.

Why here:
- Centralizes the few knobs the services honor (pydantic-settings) without
  touching the CLI signatures.
- Every field has a default that reproduces the documented behavior, so the
  programs need no environment at all.
"""

from __future__ import annotations

import codecs

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings.

    Read only from `ARGS_LESSON_*` environment variables; there is no
    configuration file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARGS_LESSON_",
        extra="ignore",
        case_sensitive=False,
    )

    integer_bits: int = Field(
        default=32,
        ge=8,
        le=64,
        description="Signed integer width used for parsing range and product wraparound.",
    )
    file_encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Text encoding used when reading files to print.",
    )
    show_locals: bool = Field(
        default=False,
        description="Include local variables in the traceback printed on read failures.",
    )

    @field_validator("file_encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value
