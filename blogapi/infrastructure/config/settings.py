"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration read from the environment or a ``.env`` file.

    ``DB_HOST`` and ``JWT_SECRET`` are accepted as alternative names for
    ``MONGO_URI`` and ``SECRET_KEY``.

    Usage:
        settings = get_settings()
        client = create_mongo_client(settings)
    """

    # MongoDB
    mongo_uri: str = Field(
        default="mongodb://localhost:27017",
        validation_alias=AliasChoices("mongo_uri", "db_host"),
    )
    mongo_database_name: str = Field(default="blog_platform")
    mongo_server_selection_timeout_ms: int = Field(default=5000)
    mongo_ensure_indexes: bool = Field(
        default=True,
        description="Create the unique indexes on username, email and title at startup.",
    )

    # Token signing
    secret_key: str = Field(
        default="",
        validation_alias=AliasChoices("secret_key", "jwt_secret"),
    )
    algorithm: str = Field(default="HS256")
    access_token_expire_minutes: Optional[int] = Field(
        default=None,
        description="Token lifetime. Unset means tokens never expire and stay "
        "valid until SECRET_KEY is rotated.",
    )

    # Application
    environment: Literal["dev", "prod", "test"] = Field(default="dev")
    debug: bool = Field(default=False)
    app_name: str = Field(default="Blog Platform API")
    app_version: str = Field(default="1.0.0")
    cors_origins: str = Field(default="http://localhost:3000")
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Refuse to start without a signing secret of at least 32 characters."""
        if len(v) < 32:
            raise ValueError(
                "SECRET_KEY must be set in environment and be at least 32 characters long"
            )
        return v

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS_ORIGINS split on commas."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process.

    Tests that change the environment must call get_settings.cache_clear().
    """
    return Settings()
