"""
Access token revocation stores.

The authentication gate only talks to the ``RevocationStore`` protocol, so
the backing store can be a database table, an in-process set or an external
cache without touching the gate.
"""
from datetime import datetime
from typing import Dict, Protocol

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, col, select

from app.core.logging_config import log_error, log_info
from app.core.time_utils import ensure_utc, utc_now
from app.models.revoked_token import RevokedToken


class RevocationStore(Protocol):
    def is_revoked(self, token: str) -> bool:
        ...

    def revoke(self, token: str, expires_at: datetime) -> None:
        ...


class InMemoryRevocationStore:
    """Process-local store. Revocations are lost on restart."""

    def __init__(self) -> None:
        self._tokens: Dict[str, datetime] = {}

    def is_revoked(self, token: str) -> bool:
        return token in self._tokens

    def revoke(self, token: str, expires_at: datetime) -> None:
        self._tokens[token] = ensure_utc(expires_at)

    def purge_expired(self) -> int:
        now = utc_now()
        expired = [token for token, expires_at in self._tokens.items() if expires_at <= now]
        for token in expired:
            del self._tokens[token]
        return len(expired)


class DatabaseRevocationStore:
    """Revocations persisted as rows of the ``revoked_token`` table."""

    def __init__(self, session: Session):
        self.session = session

    def is_revoked(self, token: str) -> bool:
        row = self.session.exec(
            select(RevokedToken.id).where(RevokedToken.token == token)
        ).first()
        return row is not None

    def revoke(self, token: str, expires_at: datetime) -> None:
        if self.is_revoked(token):
            return
        self.session.add(RevokedToken(token=token, expires_at=ensure_utc(expires_at)))
        try:
            self.session.commit()
        except IntegrityError:
            # Revoked concurrently by another request.
            self.session.rollback()
        except SQLAlchemyError as exc:
            self.session.rollback()
            log_error(exc)
            raise

    def purge_expired(self) -> int:
        try:
            result = self.session.execute(
                delete(RevokedToken).where(col(RevokedToken.expires_at) <= utc_now())
            )
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            log_error(exc)
            raise
        purged = result.rowcount or 0
        log_info(f"Purged {purged} expired revoked tokens", purged=purged)
        return purged
