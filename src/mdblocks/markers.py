"""Placeholder markers embedded in markdown documents."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MarkerSet:
    """Marker strings owned by one generated block type.

    Attributes:
        single_use: Placeholder written by the user; consumed on first run.
        begin: Opening marker of a previously generated region.
        end: Closing marker of a previously generated region.
    """

    single_use: str
    begin: str
    end: str

    def wrap(self, content: str) -> str:
        """Surround content with the begin and end markers."""
        return f"{self.begin}\n{content}{self.end}"


TOC_MARKERS = MarkerSet(
    single_use="<!--%toc%-->",
    begin="<!--%table_of_contents_begin%-->",
    end="<!--%table_of_contents_end%-->",
)

GFS_MARKERS = MarkerSet(
    single_use="<!--%gfs%-->",
    begin="<!--%file_structure_begin%-->",
    end="<!--%file_structure_end%-->",
)
