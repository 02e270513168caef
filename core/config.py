"""
Application configuration using Pydantic settings.

Usage:
    from core.config import get_settings
    settings = get_settings()
"""

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Unified application settings loaded from environment variables and .env file.

    Required for production:
        - JWT_SECRET_KEY (shared with the authentication service that issues tokens)
        - DATABASE_URL
        - UPLOAD_ROOT (persistent volume for uploaded assets)
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App settings
    app_name: str = "Job Profile Service"
    api_prefix: str = "/api"
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Database
    database_url: str = Field(default="sqlite:///job_profiles.db", validation_alias="DATABASE_URL")
    db_pool_size: int = Field(default=10, validation_alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=20, validation_alias="DB_MAX_OVERFLOW")
    db_pool_pre_ping: bool = Field(default=True, validation_alias="DB_POOL_PRE_PING")
    auto_create_tables: bool = Field(default=True, validation_alias="AUTO_CREATE_TABLES")

    # JWT / Authentication (tokens are issued by the auth service, only verified here)
    jwt_secret_key: str = Field(default="CHANGE_ME", validation_alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60 * 24)

    # Uploads
    upload_root: str = Field(default="uploads", validation_alias="UPLOAD_ROOT")
    max_upload_size_mb: int = Field(default=10, ge=1, validation_alias="MAX_UPLOAD_SIZE_MB")

    # CORS
    cors_allowed_origins: str = Field(
        default="http://localhost:5173,http://localhost:3000",
        validation_alias="CORS_ALLOWED_ORIGINS",
    )

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        """Reject placeholder secrets in production, warn elsewhere."""
        import os
        import warnings

        env = os.getenv("ENV", "development")
        is_production = env.lower() in ("production", "prod")

        forbidden_values = ["change_me", "changeme", "secret", "test", "development"]
        is_forbidden = v.lower() in forbidden_values

        if is_production and (is_forbidden or len(v) < 32):
            raise ValueError(
                "JWT_SECRET_KEY must be a non-default value of at least 32 characters in production"
            )
        if is_forbidden:
            warnings.warn(
                f"JWT_SECRET_KEY is set to a default value ('{v}'). "
                "This is insecure - set a proper key for production.",
                UserWarning,
                stacklevel=2,
            )
        return v

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]

    @property
    def upload_root_path(self) -> Path:
        """Absolute, normalized blob store root."""
        return Path(self.upload_root).expanduser().resolve()

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


__all__ = ["Settings", "get_settings"]
