"""Heading models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HeadingLine(BaseModel):
    """A markdown heading and its nesting level (1 = top level)."""

    level: int = Field(..., ge=1)
    title: str
