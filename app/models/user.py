"""
User model.
"""
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .journal import Journal


class User(BaseModel, table=True):
    """
    Registered account. ``password`` holds the bcrypt hash, never plain text.
    """
    __tablename__ = "user"

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=255, unique=True, index=True)
    phone: Optional[str] = Field(default=None, max_length=30)
    password: str = Field(..., max_length=255)

    # Relations
    journals: List["Journal"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
