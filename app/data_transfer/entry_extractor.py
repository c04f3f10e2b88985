"""
Entry extractor.

Turns the ``entries`` of an export document into normalized journal
records. Entries that cannot be used are reported as skip reasons rather
than raised, so one bad entry never sinks the rest of the batch.
"""
import re
import uuid
from typing import Any, Optional, Tuple

from app.core.logging_config import log_warning
from app.schemas.dto import (
    REQUIRED_ENTRY_FIELDS,
    ExtractionResult,
    NormalizedJournalRecord,
    SkippedEntry,
    SkipReason,
)

from .errors import MalformedDocument

_HEADING_PREFIX_RE = re.compile(r"^#+\s*")

EntryOutcome = Tuple[Optional[NormalizedJournalRecord], Optional[SkipReason]]


def split_text(text: str) -> Tuple[str, str]:
    """Split entry text into its first line and the remaining lines."""
    first_line, _, rest = text.partition("\n")
    return first_line, rest


def derive_title(text: str) -> str:
    """
    Derive a plain title from the first line of ``text``.

    Removes a leading heading marker, then bold and italic markers.

    >>> derive_title("# **Hello** World")
    'Hello World'
    """
    first_line, _ = split_text(text)
    title = first_line.strip()
    title = _HEADING_PREFIX_RE.sub("", title)
    title = title.replace("**", "")
    title = title.replace("*", "")
    return title.strip()


def derive_body(text: str) -> str:
    """Everything after the first line, trimmed."""
    _, rest = split_text(text)
    return rest.strip()


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def evaluate_entry(raw_entry: Any, user_id: uuid.UUID) -> EntryOutcome:
    """Return either a record or the reason the entry cannot be used."""
    if not isinstance(raw_entry, dict):
        return None, SkipReason.NOT_AN_OBJECT

    for field_name, reason in REQUIRED_ENTRY_FIELDS:
        if _is_missing(raw_entry.get(field_name)):
            return None, reason

    text = raw_entry["text"]
    if not isinstance(text, str):
        return None, SkipReason.MISSING_TEXT

    record = NormalizedJournalRecord(
        title=derive_title(text),
        content=derive_body(text),
        user_id=user_id,
        created_at=raw_entry["creationDate"],
        updated_at=raw_entry["modifiedDate"],
    )
    return record, None


def extract_entries(document: Any, user_id: uuid.UUID) -> ExtractionResult:
    """
    Extract journal records from an export document.

    Entries are processed in reverse document order. ``user_id`` comes from
    the authenticated requester; any owner field inside the file is ignored.

    Raises:
        MalformedDocument: If the document has no ``entries`` list
    """
    if not isinstance(document, dict):
        raise MalformedDocument("Import document must be a JSON object")
    entries = document.get("entries")
    if not isinstance(entries, list):
        raise MalformedDocument("Invalid JSON structure: 'entries' must be an array")

    result = ExtractionResult()
    for index in range(len(entries) - 1, -1, -1):
        record, reason = evaluate_entry(entries[index], user_id)
        if reason is not None:
            log_warning(
                f"Skipping entry {index}: {reason.value}",
                user_id=str(user_id),
                entry_index=index,
                reason=reason.value,
            )
            result.skipped.append(SkippedEntry(index=index, reason=reason))
            continue
        result.records.append(record)
    return result
