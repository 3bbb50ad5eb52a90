"""Shared schemas for mdblocks."""

from mdblocks.schemas.headings import HeadingLine
from mdblocks.schemas.rewrite import RewriteOutcome, RewriteResult
from mdblocks.schemas.tree import DirectoryNode, FileNode, TreeNode

__all__ = [
    "DirectoryNode",
    "FileNode",
    "HeadingLine",
    "RewriteOutcome",
    "RewriteResult",
    "TreeNode",
]
