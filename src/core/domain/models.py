"""Domain models (Pydantic v2).

These describe *what* each program produces; the CLI decides how it is shown.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ProductResult(BaseModel):
    """Outcome of multiplying the parsed command-line integers."""

    model_config = ConfigDict(frozen=True)

    factors: list[int] = Field(
        default_factory=list,
        description="Parsed integers, in argument order.",
    )
    value: int = Field(
        ...,
        description="Product of `factors`, wrapped to the signed `bits` range.",
    )
    bits: int = Field(
        default=32,
        ge=8,
        le=64,
        description="Signed integer width the product was computed in.",
    )


class FileContent(BaseModel):
    """Full text of a file, one `\\n` appended per line read."""

    model_config = ConfigDict(frozen=True)

    path: Path
    text: str = Field(
        default="",
        description="Buffer built from every line plus a newline, in read order.",
    )
    line_count: int = Field(default=0, ge=0)
