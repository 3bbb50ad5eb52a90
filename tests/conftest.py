"""Test setup for mdblocks."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def make_files(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Create files below tmp_path from a {relative path: content} mapping.

    A path ending in "/" creates an empty directory.
    """

    def _make(files: dict[str, str]) -> Path:
        for relative, content in files.items():
            path = tmp_path / relative
            if relative.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop console handlers installed by CLI runs."""
    yield
    logger = logging.getLogger("mdblocks")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
