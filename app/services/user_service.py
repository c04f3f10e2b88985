"""
User service: registration, login and account removal.
"""
import uuid
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from app.core.logging_config import log_error, log_info, log_warning
from app.core.security import create_access_token, hash_password, verify_password
from app.models.user import User
from app.schemas.auth import UserLogin, UserRegister
from app.services.journal_service import JournalService


class UserAlreadyExistsError(Exception):
    """Raised when registering an email that is already taken."""


class UserNotFoundError(Exception):
    """Raised when no user matches the lookup."""


class InvalidCredentialsError(Exception):
    """Raised when a password does not match."""


class UserService:
    """Service class for user operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_user_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(
            select(User).where(func.lower(User.email) == email.strip().lower())
        ).first()

    def register_user(self, data: UserRegister) -> tuple[User, str]:
        """Create a user and issue an access token for it."""
        email = data.email.strip().lower()
        if self.get_user_by_email(email):
            raise UserAlreadyExistsError("User already exists")

        user = User(
            name=data.username,
            email=email,
            phone=data.phone,
            password=hash_password(data.password),
        )
        try:
            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)
        except IntegrityError as exc:
            self.session.rollback()
            raise UserAlreadyExistsError("User already exists") from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            log_error(exc)
            raise

        log_info(f"User registered: {user.id}", user_id=str(user.id))
        return user, create_access_token(user.id, user.email)

    def authenticate(self, data: UserLogin) -> tuple[User, str]:
        """
        Check credentials and issue an access token.

        Raises:
            UserNotFoundError: If no account uses the email
            InvalidCredentialsError: If the password does not match
        """
        user = self.get_user_by_email(data.email)
        if not user:
            raise UserNotFoundError("User not found")
        if not verify_password(data.password, user.password):
            log_warning("Invalid login attempt", user_id=str(user.id))
            raise InvalidCredentialsError("Invalid credentials")

        log_info(f"User logged in: {user.id}", user_id=str(user.id))
        return user, create_access_token(user.id, user.email)

    def get_user_info(self, user_id: uuid.UUID) -> tuple[User, int]:
        """Return the user and the number of journals they own."""
        user = self.get_user_by_id(user_id)
        if not user:
            raise UserNotFoundError("User not found")
        return user, JournalService(self.session).count_user_journals(user_id)

    def delete_user(self, user_id: uuid.UUID) -> None:
        """Delete the user's journals, then the user."""
        user = self.get_user_by_id(user_id)
        if not user:
            raise UserNotFoundError("User not found")
        try:
            removed = JournalService(self.session).delete_user_journals(user_id)
            self.session.delete(user)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            log_error(exc, user_id=str(user_id))
            raise
        log_info(f"User deleted: {user_id}", user_id=str(user_id), journals_deleted=removed)
