"""
Import service for importing exported journal archives.

Runs the import pipeline: read the archive, extract records, persist them
one at a time, then remove the staged upload.
"""
from pathlib import Path
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.logging_config import log_error, log_info, log_warning
from app.core.retry import retry_best_effort
from app.core.time_utils import parse_timestamp
from app.data_transfer import extract_entries, read_import_document
from app.schemas.dto import ImportedJournal, ImportResult, NormalizedJournalRecord
from app.services.journal_service import JournalService


class ImportService:
    """Service for importing journals from export files."""

    def __init__(self, db: Session, journal_service: Optional[JournalService] = None):
        """
        Initialize import service.

        Args:
            db: Database session
            journal_service: Store used for inserts; defaults to one on ``db``
        """
        self.db = db
        self.journal_service = journal_service or JournalService(db)

    def import_records(
        self,
        records: Iterable[NormalizedJournalRecord],
        user_id: UUID,
    ) -> ImportResult:
        """
        Persist records one by one.

        A record the store rejects (or whose timestamps cannot be parsed) is
        logged and left out; the remaining records are still imported.
        Connectivity failures propagate and abort the import.

        Args:
            records: Records in processing order
            user_id: Owner of the new journals

        Returns:
            ImportResult listing only the journals actually created
        """
        result = ImportResult()

        for record in records:
            try:
                created_at = parse_timestamp(record.created_at)
                updated_at = parse_timestamp(record.updated_at)
                journal = self.journal_service.insert_record(
                    user_id=user_id,
                    title=record.title,
                    content=record.content,
                    created_at=created_at,
                    updated_at=updated_at,
                )
            except OperationalError:
                raise
            except (ValueError, OverflowError, OSError, SQLAlchemyError) as exc:
                self.db.rollback()
                result.failed_count += 1
                result.failures.append(f"{record.title}: {exc}")
                log_error(
                    f"Failed to import journal '{record.title}': {exc}",
                    user_id=str(user_id),
                )
                continue

            result.imported_journals.append(
                ImportedJournal(
                    id=journal.id,
                    title=journal.title,
                    created_at=journal.created_at,
                    updated_at=journal.updated_at,
                )
            )
            result.imported_count += 1

        return result

    def run_import(
        self,
        file_path: Path,
        user_id: UUID,
        *,
        content_type: Optional[str] = None,
        filename: Optional[str] = None,
        cleanup: bool = True,
    ) -> ImportResult:
        """
        Import an export file for a user.

        Args:
            file_path: Path to the staged upload
            user_id: Authenticated requester; owns every created journal
            content_type: Declared media type of the upload
            filename: Original upload filename
            cleanup: Remove ``file_path`` afterwards, whatever the outcome

        Returns:
            ImportResult with statistics

        Raises:
            ImportInputError: If the file cannot be imported at all
        """
        file_path = Path(file_path)
        log_info(f"Starting import for user {user_id}", user_id=str(user_id), file_path=str(file_path))

        try:
            document = read_import_document(file_path, content_type, filename)
            extraction = extract_entries(document, user_id)
            result = self.import_records(extraction.records, user_id)
            result.skipped_count = len(extraction.skipped)

            log_info(
                f"Import completed: {result.imported_count} journals created",
                user_id=str(user_id),
                imported=result.imported_count,
                skipped=result.skipped_count,
                failed=result.failed_count,
            )
            if result.failed_count:
                log_warning(
                    f"Import completed with {result.failed_count} failed records",
                    user_id=str(user_id),
                )
            return result
        finally:
            if cleanup:
                self.cleanup_temp_file(file_path)

    def cleanup_temp_file(self, file_path: Path) -> bool:
        """
        Remove a staged upload.

        Best effort: retried a few times to ride out handles that are still
        closing, and never raises. Only files inside the configured upload
        directory are removed.

        Args:
            file_path: Path to uploaded file

        Returns:
            True if the file is gone
        """
        upload_root = settings.upload_dir.resolve()
        try:
            resolved = Path(file_path).resolve()
        except OSError as exc:
            log_error(exc, file_path=str(file_path), context="cleanup_temp_file")
            return False

        if not resolved.is_relative_to(upload_root):
            log_warning(
                "Refusing to remove file outside the upload directory",
                file_path=str(resolved),
            )
            return False

        removed = retry_best_effort(
            lambda: resolved.unlink(missing_ok=True),
            max_attempts=settings.cleanup_max_attempts,
            delay_seconds=settings.cleanup_retry_delay_seconds,
            description="Temporary upload removal",
            file_path=str(resolved),
        )
        if removed:
            log_info(f"Cleaned up temp file: {resolved}", file_path=str(resolved))
        return removed
