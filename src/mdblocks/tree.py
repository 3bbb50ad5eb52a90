"""Tree ordering, traversal, and structure rendering."""

from __future__ import annotations

from typing import Iterator

from mdblocks.config import STRUCTURE_INDENT
from mdblocks.schemas import DirectoryNode, FileNode, TreeNode

_LINE_BREAK = "  \n"
_LAST_CONNECTOR = "└"
_MIDDLE_CONNECTOR = "├"
_BRANCH = "─"
_FOLDER_GLYPH = "📁"
_FILE_GLYPH = "📄"


def sort_key(node: TreeNode) -> int:
    """Return 0 for files and 1 for directories."""
    return node.sort_key


def is_directory(node: TreeNode) -> bool:
    """Return True for directory nodes."""
    return node.is_directory


def sort_children(directory: DirectoryNode) -> None:
    """Move files ahead of directories, keeping listing order within each group."""
    directory.children.sort(key=sort_key)


def iter_nodes(node: TreeNode) -> Iterator[TreeNode]:
    """Yield every node of the tree in depth-first pre-order."""
    yield node
    if isinstance(node, DirectoryNode):
        for child in node.children:
            yield from iter_nodes(child)


def count_nodes(node: TreeNode) -> tuple[int, int]:
    """Count (directories, files) in the tree, including the node itself."""
    directories = files = 0
    for item in iter_nodes(node):
        if item.is_directory:
            directories += 1
        else:
            files += 1
    return directories, files


def collect_markdown_files(node: TreeNode) -> list[FileNode]:
    """Collect markdown files below ``node`` in depth-first pre-order."""
    return [
        item
        for item in iter_nodes(node)
        if isinstance(item, FileNode) and item.is_markdown
    ]


def render_structure(node: TreeNode, directories_only: bool = False) -> str:
    """Render a node as a markdown tree of folder and file lines.

    Files become links to their path (forward slashes, target wrapped in
    angle brackets). Directories list their children with branch connectors;
    every line below a directory's own line is indented by one level.

    Args:
        node: Directory or file to render.
        directories_only: If True, file children are left out.

    Returns:
        The rendering, lines separated by markdown hard breaks.
    """
    return _LINE_BREAK.join(_structure_lines(node, directories_only))


def _structure_lines(node: TreeNode, directories_only: bool) -> list[str]:
    if isinstance(node, FileNode):
        target = node.path.replace("\\", "/")
        return [f"[{_FILE_GLYPH}{node.name}](<{target}>)"]

    children = [child for child in node.children if child.is_directory or not directories_only]
    lines: list[str] = []
    for index, child in enumerate(children):
        connector = _LAST_CONNECTOR if index == len(children) - 1 else _MIDDLE_CONNECTOR
        child_lines = _structure_lines(child, directories_only)
        lines.append(f"{connector}{_BRANCH}{child_lines[0]}")
        lines.extend(child_lines[1:])
    return [f"{_FOLDER_GLYPH}{node.name}"] + [STRUCTURE_INDENT + line for line in lines]
