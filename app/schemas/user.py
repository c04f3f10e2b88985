import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: uuid.UUID
    name: str
    email: str
    phone: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class UserInfoResponse(BaseModel):
    user: UserResponse
    total_journals: int
