"""
Data Transfer Objects (DTOs) for the export import pipeline.

Export files look like::

    {"entries": [{"text": "...", "creationDate": "...", "modifiedDate": "...", ...}]}

``RawEntry`` mirrors one element of ``entries``; ``NormalizedJournalRecord``
is the journal row shape derived from it; ``ImportResult`` is what an
import reports back.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SkipReason(str, Enum):
    """Why an entry was left out of an import."""
    NOT_AN_OBJECT = "not_an_object"
    MISSING_TEXT = "missing_text"
    MISSING_CREATION_DATE = "missing_creation_date"
    MISSING_MODIFIED_DATE = "missing_modified_date"


# Required entry fields, checked in this order.
REQUIRED_ENTRY_FIELDS = (
    ("text", SkipReason.MISSING_TEXT),
    ("creationDate", SkipReason.MISSING_CREATION_DATE),
    ("modifiedDate", SkipReason.MISSING_MODIFIED_DATE),
)


@dataclass(frozen=True)
class NormalizedJournalRecord:
    """
    Journal row derived from one export entry.

    ``created_at`` and ``updated_at`` keep the timestamp values as exported;
    they are parsed when the record is persisted so an unreadable date fails
    that record only.
    """
    title: str
    content: str
    user_id: uuid.UUID
    created_at: Any
    updated_at: Any


@dataclass(frozen=True)
class SkippedEntry:
    index: int
    reason: SkipReason


@dataclass
class ExtractionResult:
    """Entries partitioned into usable records and skip reasons."""
    records: List[NormalizedJournalRecord] = field(default_factory=list)
    skipped: List[SkippedEntry] = field(default_factory=list)


class ImportedJournal(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: uuid.UUID
    title: str
    created_at: datetime
    updated_at: datetime


class ImportResult(BaseModel):
    """
    Summary of a batch import.

    Only successfully persisted journals are counted and listed, in the order
    they were processed.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    imported_count: int = Field(0, description="Number of journals created")
    imported_journals: List[ImportedJournal] = Field(default_factory=list)
    skipped_count: int = Field(0, description="Entries skipped for missing fields")
    failed_count: int = Field(0, description="Records the store rejected")
    failures: List[str] = Field(default_factory=list, exclude=True)


class ImportResponse(ImportResult):
    message: str = "Journals imported successfully"
