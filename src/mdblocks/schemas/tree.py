"""Filesystem tree models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from mdblocks.config import MARKDOWN_SUFFIX


class FileNode(BaseModel):
    """A file entry discovered while indexing.

    Attributes:
        name: Entry name as returned by the directory listing.
        path: Listing path of the entry (root joined with entry names).
        is_markdown: True when the name ends with ``.md`` (case-sensitive).
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    name: str
    path: str
    is_markdown: bool = False

    @classmethod
    def from_entry(cls, name: str, path: str) -> FileNode:
        """Build a file node, deriving the markdown flag from the name."""
        return cls(name=name, path=path, is_markdown=name.endswith(MARKDOWN_SUFFIX))

    @property
    def sort_key(self) -> int:
        return 0

    @property
    def is_directory(self) -> bool:
        return False


class DirectoryNode(BaseModel):
    """A directory entry owning its child nodes."""

    kind: Literal["directory"] = "directory"
    name: str
    children: list[TreeNode] = Field(default_factory=list)

    @property
    def sort_key(self) -> int:
        return 1

    @property
    def is_directory(self) -> bool:
        return True


TreeNode = Annotated[Union[FileNode, DirectoryNode], Field(discriminator="kind")]

DirectoryNode.model_rebuild()
