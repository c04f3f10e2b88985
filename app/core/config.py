"""
Application configuration.
"""
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app import __version__


class Settings(BaseSettings):
    """Runtime settings loaded from the environment and an optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Journal Keeper"
    app_version: str = __version__
    api_v1_prefix: str = "/api/v1"
    debug: bool = False

    # Database
    database_url: str = "sqlite:///./journal.db"

    # Authentication
    secret_key: str = Field(default="change-me-in-production", min_length=8)
    algorithm: str = "HS256"
    access_token_expire_minutes: int = Field(default=120, ge=1)
    bcrypt_rounds: int = Field(default=10, ge=4, le=16)

    # Import
    import_temp_dir: str = "/tmp/journal_imports"
    import_max_file_size_mb: int = Field(default=50, ge=1)
    cleanup_max_attempts: int = Field(default=3, ge=1)
    cleanup_retry_delay_seconds: float = Field(default=0.1, ge=0)

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {value}")
        return level

    @property
    def upload_dir(self) -> Path:
        return Path(self.import_temp_dir) / "uploads"

    @property
    def import_max_file_size_bytes(self) -> int:
        return self.import_max_file_size_mb * 1024 * 1024


settings = Settings()
