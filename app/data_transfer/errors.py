"""
Import input errors.

Every subclass of ``ImportInputError`` rejects the whole import before any
record is written.
"""


class ImportInputError(ValueError):
    """The uploaded file cannot be imported."""


class UnsupportedFileType(ImportInputError):
    """The upload is neither a ZIP archive nor a JSON file."""


class NoJsonEntryFound(ImportInputError):
    """The ZIP archive holds no JSON member."""


class CorruptArchive(ImportInputError):
    """The ZIP archive cannot be opened or its JSON member cannot be parsed."""


class InvalidJson(ImportInputError):
    """A bare JSON upload is not valid JSON."""


class MalformedDocument(ImportInputError):
    """The parsed document has no ``entries`` list."""
