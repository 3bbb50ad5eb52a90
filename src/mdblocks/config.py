"""Local configuration for mdblocks."""

from __future__ import annotations

import os


DEFAULT_ROOT = "./"
DEFAULT_IGNORE_FILE = ".gitignore"
DEFAULT_LOG_LEVEL = "INFO"

# Version-control metadata is never indexed, whatever the ignore file says.
ALWAYS_IGNORED = (".git",)

MARKDOWN_SUFFIX = ".md"
TIMESTAMP_FORMAT = "%d.%m.%Y %H:%M"
TOC_INDENT = "    "
STRUCTURE_INDENT = "│&emsp;"

MDBLOCKS_ROOT = os.getenv("MDBLOCKS_ROOT", DEFAULT_ROOT)
MDBLOCKS_IGNORE_FILE = os.getenv("MDBLOCKS_IGNORE_FILE", DEFAULT_IGNORE_FILE)
MDBLOCKS_LOG_LEVEL = os.getenv("MDBLOCKS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
