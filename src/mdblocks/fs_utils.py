"""Filesystem helpers for listing directories and reading/writing documents."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from mdblocks.config import ALWAYS_IGNORED
from mdblocks.exceptions import DocumentReadError, DocumentWriteError

logger = logging.getLogger(__name__)


def list_entries(path: str) -> list[os.DirEntry]:
    """List the entries of a directory in the order the OS returns them.

    Args:
        path: Directory to list.

    Returns:
        The directory entries. The scandir handle is closed before returning.
        If reading the listing fails part way, the entries read so far are
        returned.

    Raises:
        OSError: If the directory cannot be opened.
    """
    result: list[os.DirEntry] = []
    with os.scandir(path) as entries:
        iterator = iter(entries)
        while True:
            try:
                entry = next(iterator)
            except StopIteration:
                break
            except OSError as exc:
                logger.debug("Listing of %s stopped early: %s", path, exc)
                break
            result.append(entry)
    return result


def read_document(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a whole text document, keeping its line endings as stored.

    Raises:
        DocumentReadError: If the file is unreadable or not valid text.
    """
    try:
        with Path(path).open("r", encoding=encoding, newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentReadError(f"Cannot read {path}: {exc}") from exc


def write_document(path: str | Path, content: str, encoding: str = "utf-8") -> None:
    """Replace the whole content of a text document without translating newlines.

    Raises:
        DocumentWriteError: If the file cannot be written.
    """
    try:
        with Path(path).open("w", encoding=encoding, newline="") as handle:
            handle.write(content)
    except OSError as exc:
        raise DocumentWriteError(str(exc)) from exc


def parse_ignore_lines(text: str) -> list[str]:
    """Turn ignore-file text into name substrings.

    Blank lines, ``#`` comments and ``!`` negations are dropped, and
    surrounding slashes are stripped so ``target/`` matches ``target``.
    """
    patterns: list[str] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith(("#", "!")):
            continue
        line = line.strip("/")
        if line:
            patterns.append(line)
    return patterns


def load_ignore_list(path: str | Path) -> list[str]:
    """Load ignore substrings from a file, always including ``.git``.

    A missing ignore file yields only the always-ignored names.
    """
    ignore_path = Path(path)
    patterns: list[str] = []
    if ignore_path.is_file():
        patterns = parse_ignore_lines(read_document(ignore_path))
    patterns.extend(name for name in ALWAYS_IGNORED if name not in patterns)
    return patterns
