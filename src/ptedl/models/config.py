"""Parser configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParserConfig(BaseModel):
    """Options for a single parse run."""

    encoding: str = "utf-8-sig"
    strict: bool = False  # raise on lines that match no section rule
    header_line_budget: int = Field(default=8, ge=1, le=64)
    verbose: bool = False
