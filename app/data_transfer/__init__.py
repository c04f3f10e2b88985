"""
Export import pipeline.

Reads an exported archive (ZIP or bare JSON), turns its entries into
journal records and reports what could not be used.
"""
from .archive_reader import is_zip_upload, read_import_document
from .entry_extractor import derive_body, derive_title, extract_entries, split_text
from .errors import (
    CorruptArchive,
    ImportInputError,
    InvalidJson,
    MalformedDocument,
    NoJsonEntryFound,
    UnsupportedFileType,
)

__all__ = [
    "CorruptArchive",
    "ImportInputError",
    "InvalidJson",
    "MalformedDocument",
    "NoJsonEntryFound",
    "UnsupportedFileType",
    "derive_body",
    "derive_title",
    "extract_entries",
    "is_zip_upload",
    "read_import_document",
    "split_text",
]
