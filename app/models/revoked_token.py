"""
Revoked access tokens.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Text
from sqlmodel import Field

from .base import BaseModel


class RevokedToken(BaseModel, table=True):
    """
    Access token rejected for authentication before its natural expiry.

    Rows can be purged once ``expires_at`` has passed.
    """
    __tablename__ = "revoked_token"

    token: str = Field(sa_column=Column(Text, nullable=False, unique=True))
    expires_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True)
    )
