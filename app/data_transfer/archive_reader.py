"""
Archive reader for exported journal files.

An export is either a ZIP archive holding a JSON document or the JSON
document itself. Either way the reader returns the parsed JSON value and
leaves the source file untouched.
"""
import json
import zipfile
import zlib
from pathlib import Path
from typing import Any, Optional

from app.core.config import settings
from app.core.logging_config import log_info

from .errors import CorruptArchive, InvalidJson, NoJsonEntryFound

ZIP_CONTENT_TYPES = frozenset({
    "application/zip",
    "application/x-zip",
    "application/x-zip-compressed",
    "multipart/x-zip",
})
JSON_CONTENT_TYPES = frozenset({
    "application/json",
    "text/json",
})
GENERIC_CONTENT_TYPES = frozenset({
    "application/octet-stream",
})
ZIP_SUFFIX = ".zip"
JSON_SUFFIX = ".json"


def _normalize_content_type(content_type: Optional[str]) -> str:
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def is_zip_upload(content_type: Optional[str], filename: Optional[str]) -> bool:
    """Whether the declared media type or filename marks a ZIP archive."""
    if _normalize_content_type(content_type) in ZIP_CONTENT_TYPES:
        return True
    return bool(filename) and filename.lower().endswith(ZIP_SUFFIX)


def is_supported_upload(content_type: Optional[str], filename: Optional[str]) -> bool:
    """
    Edge check on the declared media type of an upload.

    The filename suffix is only consulted when the client declared no
    specific type (missing or ``application/octet-stream``).
    """
    declared = _normalize_content_type(content_type)
    if declared in ZIP_CONTENT_TYPES or declared in JSON_CONTENT_TYPES:
        return True
    if declared and declared not in GENERIC_CONTENT_TYPES:
        return False
    name = (filename or "").lower()
    return name.endswith(ZIP_SUFFIX) or name.endswith(JSON_SUFFIX)


def _decode_json(raw: bytes) -> Any:
    # utf-8-sig tolerates a byte order mark written by some exporters.
    return json.loads(raw.decode("utf-8-sig"))


def _find_json_member(archive: zipfile.ZipFile) -> Optional[zipfile.ZipInfo]:
    for member in archive.infolist():
        if member.is_dir():
            continue
        if member.filename.lower().endswith(JSON_SUFFIX):
            return member
    return None


def _read_zip_document(file_path: Path, max_size_bytes: int) -> Any:
    try:
        with zipfile.ZipFile(file_path) as archive:
            member = _find_json_member(archive)
            if member is None:
                raise NoJsonEntryFound("No JSON file found in the ZIP archive")
            if member.file_size > max_size_bytes:
                raise CorruptArchive(
                    f"JSON member '{member.filename}' exceeds the maximum size"
                )
            raw = archive.read(member)
    except (zipfile.BadZipFile, zipfile.LargeZipFile, EOFError) as exc:
        raise CorruptArchive(f"Could not open ZIP archive: {exc}") from exc
    except (RuntimeError, NotImplementedError, zlib.error) as exc:
        # Encrypted or damaged members.
        raise CorruptArchive(f"Could not read ZIP member: {exc}") from exc

    try:
        document = _decode_json(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CorruptArchive(f"Invalid JSON in '{member.filename}': {exc}") from exc

    log_info(
        f"Read import document from ZIP member {member.filename}",
        file_path=str(file_path),
        member=member.filename,
    )
    return document


def _read_json_document(file_path: Path) -> Any:
    try:
        raw = file_path.read_bytes()
    except OSError as exc:
        raise InvalidJson(f"Could not read import file: {exc}") from exc

    try:
        return _decode_json(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidJson(f"Invalid JSON: {exc}") from exc


def read_import_document(
    file_path: Path,
    content_type: Optional[str] = None,
    filename: Optional[str] = None,
    *,
    max_size_bytes: Optional[int] = None,
) -> Any:
    """
    Read an export file and return its parsed JSON document.

    Args:
        file_path: Path of the staged upload
        content_type: Declared media type of the upload
        filename: Original filename; falls back to ``file_path``'s name
        max_size_bytes: Largest accepted uncompressed JSON member

    Returns:
        The parsed JSON value (validated later by the extractor)

    Raises:
        NoJsonEntryFound: ZIP archive without a JSON member
        CorruptArchive: ZIP archive that cannot be opened or parsed
        InvalidJson: Bare JSON file that cannot be parsed
    """
    file_path = Path(file_path)
    name = filename or file_path.name
    limit = max_size_bytes if max_size_bytes is not None else settings.import_max_file_size_bytes

    if is_zip_upload(content_type, name):
        return _read_zip_document(file_path, limit)
    return _read_json_document(file_path)
