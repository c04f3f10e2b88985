"""
Shared helpers for CLI commands.
"""
import typer
from sqlmodel import Session

from app.models.user import User
from app.services.user_service import UserService


def confirm_action(message: str, default: bool = False) -> bool:
    return typer.confirm(message, default=default)


def resolve_user(session: Session, email: str) -> User:
    """Look up a user by email or exit with an error."""
    user = UserService(session).get_user_by_email(email)
    if not user:
        typer.secho(f"User not found: {email}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return user
