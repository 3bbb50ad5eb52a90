"""Command-line entry point for mdblocks."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from mdblocks.config import MDBLOCKS_IGNORE_FILE, MDBLOCKS_LOG_LEVEL, MDBLOCKS_ROOT
from mdblocks.exceptions import IndexingError
from mdblocks.fs_utils import load_ignore_list
from mdblocks.indexer import index_filesystem
from mdblocks.markers import GFS_MARKERS, TOC_MARKERS
from mdblocks.processing import generate_file_structure, generate_toc
from mdblocks.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

DIRONLY_TOKEN = "--dironly"

USAGE = f"""
===MarkdownUtils===
[COMMANDS]
gtoc            | Embed '{TOC_MARKERS.single_use}' in your markdown document to generate a table of content
gfs [{DIRONLY_TOKEN}] | Embed '{GFS_MARKERS.single_use}' in your markdown doc to generate a view of subdirectories
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdblocks",
        description="Generate tables of contents and file-structure views inside markdown files.",
    )
    parser.add_argument("--root", default=MDBLOCKS_ROOT, help="Directory to scan (default: %(default)s)")
    parser.add_argument(
        "--ignore-file",
        default=MDBLOCKS_IGNORE_FILE,
        help="Ignore-list file, relative to the root (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug output")
    parser.add_argument("command", nargs="?", help="gtoc or gfs")
    parser.add_argument("flags", nargs=argparse.REMAINDER, help="Command flags, e.g. --dironly")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the process exit status."""
    args = build_parser().parse_args(argv)

    if not args.command:
        print(USAGE)
        return 0

    command = args.command.lower()
    if command not in ("gtoc", "gfs"):
        print(f"[ERROR]: Unknown arg '{command}'", file=sys.stderr)
        return 2

    configure_logging(logging.DEBUG if args.verbose else MDBLOCKS_LOG_LEVEL)

    try:
        ignore = load_ignore_list(Path(args.root) / args.ignore_file)
        tree = index_filesystem(args.root, ignore)
    except IndexingError as exc:
        logger.error("%s", exc)
        return 1

    if command == "gtoc":
        outcomes = generate_toc(tree)
    else:
        directories_only = any(DIRONLY_TOKEN in flag for flag in args.flags)
        if directories_only:
            logger.info("dironly=true")
        outcomes = generate_file_structure(tree, directories_only=directories_only)

    return 1 if any(outcome.failed for outcome in outcomes) else 0
