"""Application configuration using environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, AnyHttpUrl, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the project root once so that `.env` is discovered regardless of CWD
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# Value shipped in the sample `.env`; treated the same as an unset key.
PLACEHOLDER_API_KEY = "your_openai_api_key_here"


class Settings(BaseSettings):
    """Load configuration from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    openai_api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "openai_api_key"),
    )
    openai_base_url: AnyHttpUrl = Field(
        default_factory=lambda: AnyHttpUrl("https://api.openai.com/v1"),
        validation_alias=AliasChoices("OPENAI_BASE_URL", "openai_base_url"),
    )
    translation_model: str = Field(
        default="gpt-4",
        validation_alias=AliasChoices("TRANSLATION_MODEL", "translation_model"),
    )
    translation_temperature: float = Field(
        default=0.3,
        ge=0.0,
        le=2.0,
        validation_alias=AliasChoices(
            "TRANSLATION_TEMPERATURE", "translation_temperature"
        ),
    )
    translation_max_tokens: int = Field(
        default=1000,
        ge=1,
        validation_alias=AliasChoices(
            "TRANSLATION_MAX_TOKENS", "translation_max_tokens"
        ),
    )
    request_timeout: float = Field(
        default=60.0,
        ge=1,
        validation_alias=AliasChoices("REQUEST_TIMEOUT", "request_timeout"),
    )

    google_application_credentials: Optional[Path] = Field(
        default=None,
        validation_alias=AliasChoices(
            "GOOGLE_APPLICATION_CREDENTIALS",
            "google_application_credentials",
        ),
    )

    require_live_mode: bool = Field(
        default=False,
        validation_alias=AliasChoices("REQUIRE_LIVE_MODE", "require_live_mode"),
    )
    verify_connections: bool = Field(
        default=True,
        validation_alias=AliasChoices("VERIFY_CONNECTIONS", "verify_connections"),
    )

    cors_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:3001",
            "http://127.0.0.1:3001",
        ],
        validation_alias=AliasChoices("CORS_ORIGINS", "cors_origins"),
    )
    host: str = Field(
        default="0.0.0.0",
        validation_alias=AliasChoices("HOST", "host"),
    )
    port: int = Field(
        default=3001,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("PORT", "port"),
    )

    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
    )
    log_dir: Optional[Path] = Field(
        default=None,
        validation_alias=AliasChoices("LOG_DIR", "log_dir"),
    )
    log_retention_hours: int = Field(
        default=48,
        ge=0,
        validation_alias=AliasChoices("LOG_RETENTION_HOURS", "log_retention_hours"),
    )

    @property
    def openai_key_value(self) -> str | None:
        if self.openai_api_key is None:
            return None
        value = self.openai_api_key.get_secret_value().strip()
        if not value or value == PLACEHOLDER_API_KEY:
            return None
        return value

    def missing_credentials(self) -> list[str]:
        """Return the environment variable names of unset credentials."""

        missing: list[str] = []
        if self.openai_key_value is None:
            missing.append("OPENAI_API_KEY")
        if not self.google_application_credentials or not str(
            self.google_application_credentials
        ).strip():
            missing.append("GOOGLE_APPLICATION_CREDENTIALS")
        return missing

    @property
    def demo_mode(self) -> bool:
        return bool(self.missing_credentials())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached `Settings` instance."""

    return Settings()  # pyright: ignore[reportCallIssue]


__all__ = ["PLACEHOLDER_API_KEY", "Settings", "get_settings"]
