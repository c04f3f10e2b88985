from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

# bcrypt only hashes the first 72 bytes and rejects longer input.
MAX_PASSWORD_BYTES = 72


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded")
    return value


class UserRegister(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=30)
    password: str = Field(..., min_length=1, max_length=MAX_PASSWORD_BYTES)

    @field_validator("password")
    @classmethod
    def password_fits_hash(cls, value: str) -> str:
        return _check_password_bytes(value)


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=MAX_PASSWORD_BYTES)

    @field_validator("password")
    @classmethod
    def password_fits_hash(cls, value: str) -> str:
        return _check_password_bytes(value)


class TokenResponse(BaseModel):
    message: str
    token: str
    token_type: str = "bearer"


class MessageResponse(BaseModel):
    message: str
