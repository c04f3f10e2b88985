# Import all models for easy access
from .base import BaseModel
from .journal import Journal
from .revoked_token import RevokedToken
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Journal",
    "RevokedToken",
]
