"""Tests for filesystem indexing."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from mdblocks import indexer
from mdblocks.exceptions import IndexingError, StructureError
from mdblocks.indexer import index_directory, index_filesystem, is_ignored
from mdblocks.schemas import DirectoryNode, FileNode
from mdblocks.tree import iter_nodes


def _names(directory: DirectoryNode) -> set[str]:
    return {child.name for child in directory.children}


def _child(directory: DirectoryNode, name: str):
    return next(child for child in directory.children if child.name == name)


class _BrokenEntry:
    """Directory entry whose type lookup fails."""

    name = "broken"
    path = "./broken"

    def is_dir(self, *, follow_symlinks: bool = True) -> bool:
        raise PermissionError("stat failed")


class TestIndexFilesystem:
    """Tests for index_filesystem."""

    def test_builds_nested_tree(self, make_files) -> None:
        root = make_files(
            {
                "README.md": "# Readme",
                "docs/guide.md": "# Guide",
                "docs/img/logo.png": "png",
                "empty/": "",
            }
        )

        tree = index_filesystem(str(root))

        assert tree.name == str(root)
        assert _names(tree) == {"README.md", "docs", "empty"}
        docs = _child(tree, "docs")
        assert isinstance(docs, DirectoryNode)
        assert _names(docs) == {"guide.md", "img"}
        assert _child(tree, "empty").children == []

    def test_files_precede_directories_at_every_level(self, make_files) -> None:
        root = make_files(
            {
                "a/1.txt": "",
                "a/b/2.txt": "",
                "a/b/c/3.md": "",
                "a/z.md": "",
                "m.txt": "",
                "y/": "",
                "z.md": "",
            }
        )

        tree = index_filesystem(str(root))

        for node in iter_nodes(tree):
            if isinstance(node, DirectoryNode):
                keys = [child.sort_key for child in node.children]
                assert keys == sorted(keys), node.name

    def test_file_paths_join_root_and_names(self, make_files) -> None:
        root = make_files({"docs/guide.md": ""})

        tree = index_filesystem(str(root))

        guide = _child(_child(tree, "docs"), "guide.md")
        assert isinstance(guide, FileNode)
        assert guide.path == os.path.join(str(root), "docs", "guide.md")
        assert guide.is_markdown

    def test_custom_root_name(self, make_files) -> None:
        root = make_files({"a.md": ""})

        assert index_filesystem(root, name="./").name == "./"

    def test_markdown_flag(self, make_files) -> None:
        root = make_files({"notes.md": "", "SHOUT.MD": "", "data.json": ""})

        tree = index_filesystem(str(root))

        flags = {child.name: child.is_markdown for child in tree.children}
        assert flags == {"notes.md": True, "SHOUT.MD": False, "data.json": False}

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(IndexingError):
            index_filesystem(str(tmp_path / "missing"))

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinked_directory_is_not_followed(self, make_files) -> None:
        root = make_files({"real/inner.md": ""})
        os.symlink(root / "real", root / "link", target_is_directory=True)

        tree = index_filesystem(str(root))

        assert isinstance(_child(tree, "link"), FileNode)


class TestIgnoreList:
    """Tests for substring ignore semantics."""

    @pytest.mark.parametrize("name", ["x", "ax", "xa"])
    def test_is_ignored_matches_substrings(self, name: str) -> None:
        assert is_ignored(name, ["x"])

    def test_is_ignored_without_match(self) -> None:
        assert not is_ignored("keep", ["x", "node_modules"])
        assert not is_ignored("anything", [])

    def test_ignored_entries_are_skipped_with_subtree(self, make_files) -> None:
        root = make_files(
            {
                "x/a.md": "",
                "ax/b.md": "",
                "xa.md": "",
                "keep/c.md": "",
                "node_modules_extra/pkg/README.md": "",
            }
        )

        tree = index_filesystem(str(root), ["x", "node_modules"])

        assert _names(tree) == {"keep"}
        assert [node.name for node in iter_nodes(tree) if isinstance(node, FileNode)] == ["c.md"]

    def test_ignore_applies_at_every_depth(self, make_files) -> None:
        root = make_files({"src/target/out.md": "", "src/lib.md": ""})

        tree = index_filesystem(str(root), ["target"])

        assert _names(_child(tree, "src")) == {"lib.md"}


class TestIndexingErrors:
    """Tests for unreadable directories and entries."""

    def test_unlistable_subdirectory_is_skipped(self, make_files, monkeypatch, caplog) -> None:
        root = make_files({"locked/secret.md": "", "open/page.md": "", "top.md": ""})
        real_list_entries = indexer.list_entries

        def fake_list_entries(path: str):
            if path.endswith("locked"):
                raise PermissionError(13, "Permission denied", path)
            return real_list_entries(path)

        monkeypatch.setattr(indexer, "list_entries", fake_list_entries)

        with caplog.at_level(logging.WARNING, logger="mdblocks"):
            tree = index_filesystem(str(root))

        assert _names(tree) == {"open", "top.md"}
        assert "locked" in caplog.text

    def test_entry_with_broken_metadata_is_skipped(self, monkeypatch) -> None:
        monkeypatch.setattr(indexer, "list_entries", lambda path: [_BrokenEntry()])

        tree = index_filesystem("./")

        assert tree.children == []

    def test_index_directory_rejects_file_target(self, tmp_path: Path) -> None:
        with pytest.raises(StructureError):
            index_directory(FileNode.from_entry("a.md", "./a.md"), str(tmp_path), [])
