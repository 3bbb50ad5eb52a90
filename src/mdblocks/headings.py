"""Heading extraction and nesting normalization."""

from __future__ import annotations

import re

from mdblocks.schemas import HeadingLine

_HEADING_RE = re.compile(r"^(#+) ")


def extract_headings(text: str, *, normalize: bool = True) -> list[HeadingLine]:
    """Extract headings from a markdown document in document order.

    A heading is any line starting with one or more ``#`` followed by a
    space. The title is everything after that first space, untrimmed.

    Args:
        text: Full document text.
        normalize: If True, apply :func:`normalize_headings`.
    """
    headings: list[HeadingLine] = []
    for line in text.splitlines():
        match = _HEADING_RE.match(line)
        if not match:
            continue
        headings.append(HeadingLine(level=len(match.group(1)), title=line[match.end():]))
    return normalize_headings(headings) if normalize else headings


def normalize_headings(headings: list[HeadingLine]) -> list[HeadingLine]:
    """Drop a single document title and promote the remaining headings.

    When exactly one level-1 heading exists it is treated as the title:
    it is removed and every other heading moves up one level. With zero or
    several level-1 headings the list is returned unchanged.
    """
    top_level = [heading for heading in headings if heading.level == 1]
    if len(top_level) != 1:
        return list(headings)
    title = top_level[0]
    return [
        heading.model_copy(update={"level": heading.level - 1})
        for heading in headings
        if heading is not title
    ]
