"""Render table-of-contents and file-structure blocks."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from mdblocks.config import TIMESTAMP_FORMAT, TOC_INDENT
from mdblocks.exceptions import StructureError
from mdblocks.markers import GFS_MARKERS, TOC_MARKERS
from mdblocks.schemas import HeadingLine, TreeNode
from mdblocks.tree import render_structure


def make_slug(title: str) -> str:
    """Lowercase a heading title and replace spaces with hyphens."""
    return title.lower().replace(" ", "-")


def render_toc_item(heading: HeadingLine) -> str:
    indent = TOC_INDENT * (heading.level - 1)
    return f"{indent}- [{heading.title}](#{make_slug(heading.title)})  \n"


def render_timestamp(now: datetime | None = None) -> str:
    """Render the "last update" line in local time."""
    moment = now or datetime.now()
    return f"<sup><sup>Last update: {moment.strftime(TIMESTAMP_FORMAT)}</sup></sup>\n"


def render_toc(headings: Iterable[HeadingLine], *, now: datetime | None = None) -> str:
    """Create a marker-wrapped table of contents for normalized headings."""
    items = "".join(render_toc_item(heading) for heading in headings)
    return TOC_MARKERS.wrap(items + render_timestamp(now))


def render_file_structure(directory: TreeNode, *, directories_only: bool = False) -> str:
    """Create a marker-wrapped structure view of ``directory``.

    Raises:
        StructureError: If ``directory`` is a file node.
    """
    if not directory.is_directory:
        raise StructureError(f"Cannot render structure of file {directory.name!r}")
    return GFS_MARKERS.wrap(render_structure(directory, directories_only) + "\n")
