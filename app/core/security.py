"""
Password hashing and access token helpers.
"""
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt

from app.core.config import settings
from app.core.time_utils import utc_now


class InvalidTokenError(Exception):
    """Raised when an access token cannot be decoded or has expired."""


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False


def create_access_token(
    user_id: uuid.UUID,
    email: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Issue a signed access token for a user."""
    issued_at = utc_now()
    expire = issued_at + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": issued_at,
        "exp": expire,
        # Unique token id so two tokens issued in the same second differ.
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate an access token.

    Raises:
        InvalidTokenError: If the signature is invalid, the token expired or
            required claims are missing
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise InvalidTokenError("Token has expired") from exc
    except jwt.InvalidTokenError as exc:
        raise InvalidTokenError("Invalid token") from exc

    try:
        uuid.UUID(str(payload["sub"]))
    except ValueError as exc:
        raise InvalidTokenError("Invalid token subject") from exc
    return payload


def token_expiry(payload: Dict[str, Any]) -> datetime:
    """Return the expiry of a decoded token payload as an aware datetime."""
    return datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
