"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./skillshare.db"

    SECRET_KEY: str = ""

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "SkillShare API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Auth
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None

    # Templates
    SEED_TEMPLATES: bool = True
    SYSTEM_USER_EMAIL: str = "system@skillshare.local"

    @field_validator("SYSTEM_USER_EMAIL", mode="after")
    @classmethod
    def normalize_system_email(cls, value: str) -> str:
        """Strip and lowercase the template owner email."""
        return value.strip().lower()

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept lowercase level names; an empty value means the environment default."""
        if isinstance(value, str):
            return value.strip().upper() or None
        return value

    @model_validator(mode="after")
    def validate_secret_key(self) -> "Settings":
        """Refuse to run production without a signing key."""
        if self.ENVIRONMENT == "production" and not self.SECRET_KEY:
            msg = "SECRET_KEY is required when ENVIRONMENT is 'production'"
            raise ValueError(msg)
        return self


def configure_logging(settings: Settings) -> None:
    """
    Route structlog through stdlib logging.

    Production emits one JSON object per line; other environments get the
    coloured console renderer. LOG_LEVEL overrides the environment default
    (DEBUG in development, INFO elsewhere).
    """
    default_level = "DEBUG" if settings.ENVIRONMENT == "development" else "INFO"
    level = settings.LOG_LEVEL or default_level
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if settings.ENVIRONMENT == "production"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
