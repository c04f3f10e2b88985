"""
Shared API dependencies: database session, revocation store and the
authentication gate.
"""
import uuid
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from app.core.database import get_session
from app.core.logging_config import log_warning
from app.core.security import InvalidTokenError, decode_access_token
from app.models.user import User
from app.services.token_revocation import DatabaseRevocationStore, RevocationStore

bearer_scheme = HTTPBearer(auto_error=False)

__all__ = [
    "get_bearer_token",
    "get_current_user",
    "get_revocation_store",
    "get_session",
]


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_revocation_store(
    session: Annotated[Session, Depends(get_session)],
) -> RevocationStore:
    return DatabaseRevocationStore(session)


def get_bearer_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> str:
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        log_warning("Authorization header missing or malformed")
        raise _unauthorized("Not authenticated")
    return credentials.credentials


def get_current_user(
    token: Annotated[str, Depends(get_bearer_token)],
    session: Annotated[Session, Depends(get_session)],
    revocation_store: Annotated[RevocationStore, Depends(get_revocation_store)],
) -> User:
    """Resolve the requester from a valid, unrevoked bearer token."""
    try:
        payload = decode_access_token(token)
    except InvalidTokenError as exc:
        log_warning(f"Token verification failed: {exc}")
        raise _unauthorized("Invalid or expired token") from None

    if revocation_store.is_revoked(token):
        raise _unauthorized("Token is invalid or expired")

    user = session.get(User, uuid.UUID(payload["sub"]))
    if not user:
        raise _unauthorized("Invalid or expired token")
    return user
