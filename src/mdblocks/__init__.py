"""mdblocks: generate tables of contents and file-structure views in markdown."""

from mdblocks.exceptions import (
    DocumentReadError,
    DocumentWriteError,
    IndexingError,
    MdblocksError,
    StructureError,
)
from mdblocks.headings import extract_headings, normalize_headings
from mdblocks.indexer import index_filesystem
from mdblocks.markers import GFS_MARKERS, TOC_MARKERS, MarkerSet
from mdblocks.processing import generate_file_structure, generate_toc
from mdblocks.rewriter import rewrite_block
from mdblocks.schemas import DirectoryNode, FileNode, HeadingLine, RewriteOutcome

__all__ = [
    "DirectoryNode",
    "DocumentReadError",
    "DocumentWriteError",
    "FileNode",
    "GFS_MARKERS",
    "HeadingLine",
    "IndexingError",
    "MarkerSet",
    "MdblocksError",
    "RewriteOutcome",
    "StructureError",
    "TOC_MARKERS",
    "extract_headings",
    "generate_file_structure",
    "generate_toc",
    "index_filesystem",
    "normalize_headings",
    "rewrite_block",
]
