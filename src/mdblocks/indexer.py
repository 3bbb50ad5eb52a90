"""Index a directory tree into the in-memory node model."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from mdblocks.config import DEFAULT_ROOT
from mdblocks.exceptions import IndexingError, StructureError
from mdblocks.fs_utils import list_entries
from mdblocks.schemas import DirectoryNode, FileNode, TreeNode
from mdblocks.tree import count_nodes, sort_children

logger = logging.getLogger(__name__)


def is_ignored(name: str, ignore: Iterable[str]) -> bool:
    """Return True when any ignore entry occurs anywhere in ``name``."""
    return any(pattern in name for pattern in ignore)


def index_filesystem(
    root: str | Path = DEFAULT_ROOT,
    ignore: Iterable[str] = (),
    *,
    name: str | None = None,
) -> DirectoryNode:
    """Build the directory tree rooted at ``root``.

    Args:
        root: Directory to scan. File paths in the tree are built by joining
            this value with entry names, so ``"./"`` yields ``./docs/a.md``.
        ignore: Substrings; entries whose name contains one are skipped
            together with their subtree.
        name: Display name of the root node. Defaults to ``root`` as given.

    Returns:
        The root directory node, with files ordered before directories at
        every level.

    Raises:
        IndexingError: If the root directory itself cannot be listed.
    """
    root_path = os.fspath(root)
    tree = DirectoryNode(name=name or root_path)
    index_directory(tree, root_path, list(ignore))
    directories, files = count_nodes(tree)
    logger.debug("Indexed %s: %d directories, %d files", root_path, directories, files)
    return tree


def index_directory(target: TreeNode, path: str, ignore: list[str]) -> None:
    """Fill ``target`` with the entries of ``path`` and sort its children.

    Raises:
        StructureError: If ``target`` is not a directory node.
        IndexingError: If ``path`` cannot be listed.
    """
    if not isinstance(target, DirectoryNode):
        raise StructureError(f"Cannot index into non-directory node {target.name!r}")
    try:
        entries = list_entries(path)
    except OSError as exc:
        raise IndexingError(f"Cannot list {path}: {exc}") from exc

    for entry in entries:
        if is_ignored(entry.name, ignore):
            continue
        try:
            entry_is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            logger.debug("Skipping %s: %s", entry.path, exc)
            continue

        if not entry_is_dir:
            target.children.append(FileNode.from_entry(entry.name, entry.path))
            continue

        child = DirectoryNode(name=entry.name)
        try:
            index_directory(child, entry.path, ignore)
        except IndexingError as exc:
            logger.warning("%s", exc)
            continue
        target.children.append(child)

    sort_children(target)
