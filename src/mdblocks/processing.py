"""Pipelines that regenerate blocks across every markdown file of a tree."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from mdblocks.exceptions import DocumentReadError, DocumentWriteError, StructureError
from mdblocks.fs_utils import read_document, write_document
from mdblocks.headings import extract_headings
from mdblocks.markers import GFS_MARKERS, TOC_MARKERS, MarkerSet
from mdblocks.output_formatter import render_file_structure, render_toc
from mdblocks.rewriter import rewrite_block
from mdblocks.schemas import DirectoryNode, FileNode, RewriteOutcome, TreeNode
from mdblocks.tree import collect_markdown_files

logger = logging.getLogger(__name__)


def generate_toc(root: TreeNode, *, now: datetime | None = None) -> list[RewriteOutcome]:
    """Refresh the table of contents of every markdown file under ``root``.

    Each file's block is built from its own headings. Files that cannot be
    read or written are reported and skipped.

    Args:
        root: Indexed tree.
        now: Timestamp for the "last update" line. Defaults to local now.

    Returns:
        One outcome per markdown file, in traversal order.
    """

    def render(text: str) -> str:
        return render_toc(extract_headings(text), now=now)

    return [
        update_document(markdown_file, render, TOC_MARKERS)
        for markdown_file in collect_markdown_files(root)
    ]


def generate_file_structure(
    directory: TreeNode, *, directories_only: bool = False
) -> list[RewriteOutcome]:
    """Refresh the file-structure block of every markdown file under ``directory``.

    Each markdown file receives the structure of the directory that
    directly contains it.

    Raises:
        StructureError: If ``directory`` is a file node.
    """
    if not isinstance(directory, DirectoryNode):
        raise StructureError(f"Expected a directory, got file {directory.name!r}")

    outcomes: list[RewriteOutcome] = []
    block: str | None = None
    for child in directory.children:
        if isinstance(child, DirectoryNode):
            outcomes.extend(
                generate_file_structure(child, directories_only=directories_only)
            )
            continue
        if not child.is_markdown:
            continue
        if block is None:
            block = render_file_structure(directory, directories_only=directories_only)
        outcomes.append(update_document(child, _constant(block), GFS_MARKERS))
    return outcomes


def update_document(
    markdown_file: FileNode,
    render: Callable[[str], str],
    markers: MarkerSet,
) -> RewriteOutcome:
    """Read, rewrite, and (when changed) write back one markdown file.

    Args:
        markdown_file: File to update.
        render: Builds the marker-wrapped block from the current text.
        markers: Marker set of the block being written.
    """
    path, name = markdown_file.path, markdown_file.name
    try:
        text = read_document(path)
    except DocumentReadError as exc:
        logger.error("%s", exc)
        return RewriteOutcome(path=path, name=name, error=str(exc))

    result = rewrite_block(text, render(text), markers)
    if not result.changed:
        logger.debug("%s unchanged", name)
        return RewriteOutcome(path=path, name=name)

    try:
        write_document(path, result.text)
    except DocumentWriteError as exc:
        logger.error("ERROR updating %s - %s", name, exc)
        return RewriteOutcome(path=path, name=name, error=str(exc))

    logger.info("%s updated successfully!", name)
    return RewriteOutcome(path=path, name=name, changed=True)


def _constant(block: str) -> Callable[[str], str]:
    return lambda _text: block
