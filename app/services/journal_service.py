"""
Journal service for managing a user's journal entries.
"""
import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, func, or_, select

from app.core.logging_config import log_error, log_info
from app.core.time_utils import ensure_utc, utc_now
from app.models.journal import Journal
from app.schemas.journal import JournalCreate, JournalFilters, JournalUpdate


class JournalNotFoundError(Exception):
    """Raised when a journal is not found or not owned by the user."""


class JournalService:
    """Service class for journal operations."""

    def __init__(self, session: Session):
        self.session = session

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            log_error(exc)
            raise

    def create_journal(self, user_id: uuid.UUID, data: JournalCreate) -> Journal:
        journal = Journal(
            user_id=user_id,
            title=data.title,
            content=data.content,
        )
        self.session.add(journal)
        self._commit()
        self.session.refresh(journal)
        log_info(f"Journal created: {journal.id} for user {user_id}")
        return journal

    def insert_record(
        self,
        user_id: uuid.UUID,
        title: str,
        content: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> Journal:
        """
        Insert one journal with explicit timestamps, in its own transaction.

        Used by imports, which keep the timestamps from the export.
        """
        journal = Journal(
            user_id=user_id,
            title=title,
            content=content,
            created_at=ensure_utc(created_at),
            updated_at=ensure_utc(updated_at),
        )
        self.session.add(journal)
        self._commit()
        self.session.refresh(journal)
        return journal

    def get_journal(self, journal_id: uuid.UUID, user_id: uuid.UUID) -> Journal:
        journal = self.session.exec(
            select(Journal).where(
                Journal.id == journal_id,
                Journal.user_id == user_id,
            )
        ).first()
        if not journal:
            raise JournalNotFoundError(f"Journal {journal_id} not found")
        return journal

    def get_user_journals(
        self,
        user_id: uuid.UUID,
        filters: Optional[JournalFilters] = None,
    ) -> List[Journal]:
        filters = filters or JournalFilters()
        statement = select(Journal).where(Journal.user_id == user_id)

        if filters.search:
            pattern = f"%{filters.search.strip().lower()}%"
            statement = statement.where(
                or_(
                    func.lower(Journal.title).like(pattern),
                    func.lower(Journal.content).like(pattern),
                )
            )
        if filters.start_date is not None:
            statement = statement.where(col(Journal.created_at) >= ensure_utc(filters.start_date))
        if filters.end_date is not None:
            statement = statement.where(col(Journal.created_at) <= ensure_utc(filters.end_date))

        statement = (
            statement
            .order_by(col(Journal.created_at).desc(), col(Journal.id))
            .offset(filters.offset)
            .limit(filters.limit)
        )
        return list(self.session.exec(statement).all())

    def count_user_journals(self, user_id: uuid.UUID) -> int:
        total = self.session.exec(
            select(func.count(Journal.id)).where(Journal.user_id == user_id)
        ).one()
        return int(total)

    def update_journal(
        self,
        journal_id: uuid.UUID,
        user_id: uuid.UUID,
        data: JournalUpdate,
    ) -> Journal:
        journal = self.get_journal(journal_id, user_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(journal, key, value)
        journal.updated_at = utc_now()

        self.session.add(journal)
        self._commit()
        self.session.refresh(journal)
        log_info(f"Journal updated: {journal_id}")
        return journal

    def delete_journal(self, journal_id: uuid.UUID, user_id: uuid.UUID) -> None:
        journal = self.get_journal(journal_id, user_id)
        self.session.delete(journal)
        self._commit()
        log_info(f"Journal deleted: {journal_id}")

    def delete_user_journals(self, user_id: uuid.UUID) -> int:
        """Delete every journal of a user. Caller commits."""
        journals = self.session.exec(
            select(Journal).where(Journal.user_id == user_id)
        ).all()
        for journal in journals:
            self.session.delete(journal)
        return len(journals)
