"""Rewrite result models."""

from __future__ import annotations

from pydantic import BaseModel


class RewriteResult(BaseModel):
    """Document text after a block rewrite."""

    text: str
    changed: bool


class RewriteOutcome(BaseModel):
    """What happened to one markdown file during a run.

    Attributes:
        path: Listing path of the markdown file.
        name: File name used in console messages.
        changed: True when new content was written.
        error: Description of the read or write failure, if any.
    """

    path: str
    name: str
    changed: bool = False
    error: str | None = None

    @property
    def failed(self) -> bool:
        """True when the file could not be read or written."""
        return self.error is not None
