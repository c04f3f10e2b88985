"""
Journal model.
"""
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Text
from sqlmodel import Field, Index, Relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .user import User


class Journal(BaseModel, table=True):
    """
    A single journal entry owned by a user.

    Imported journals keep the creation and modification times from the export.
    """
    __tablename__ = "journal"

    title: str = Field(..., max_length=500)
    content: str = Field(default="", sa_column=Column(Text, nullable=False))
    user_id: uuid.UUID = Field(
        sa_column=Column(
            ForeignKey("user.id", ondelete="CASCADE"),
            nullable=False,
            index=True
        )
    )

    # Relations
    user: "User" = Relationship(back_populates="journals")

    __table_args__ = (
        Index('idx_journal_user_created', 'user_id', 'created_at'),
    )
