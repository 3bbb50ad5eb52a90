"""Custom exceptions for mdblocks."""


class MdblocksError(Exception):
    """Base exception for mdblocks operations."""


class IndexingError(MdblocksError):
    """A directory could not be listed."""


class DocumentReadError(MdblocksError):
    """A markdown document could not be read as text."""


class DocumentWriteError(MdblocksError):
    """A rewritten markdown document could not be persisted."""


class StructureError(MdblocksError):
    """The tree handed to an operation does not have the expected shape."""
