"""
Configuration module using pydantic-settings.
Loads environment variables from .env file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Model API Configuration
    openai_api_key: str | None = Field(
        default=None,
        description="Credential for the model API (analysis is refused without it)",
    )
    openai_base_url: str | None = Field(
        default=None,
        description="Optional override for the model API endpoint",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="Model used for product analysis",
    )

    # Analysis Configuration
    analysis_max_tokens: int = Field(
        default=2048,
        gt=0,
        description="Maximum output tokens for one analysis",
    )
    analysis_temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    analysis_max_retries: int = Field(
        default=0,
        ge=0,
        description="Extra attempts for rate-limited or upstream failures",
    )
    analysis_retry_delay: float = Field(
        default=1.0,
        ge=0.0,
        description="Base delay in seconds for exponential backoff",
    )
    analysis_strict_contract: bool = Field(
        default=False,
        description="Reject replies that omit any of the eight result fields",
    )

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file name under log_dir (None disables file logging)",
    )
    log_dir: str = Field(
        default="logs",
        description="Directory for the log file",
    )

    @field_validator("openai_api_key", "openai_base_url", "log_file", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def has_api_key(self) -> bool:
        return self.openai_api_key is not None


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


class _SettingsProxy:
    """
    Lazy proxy for settings.
    Only loads settings when accessed, allowing import without .env file.
    """

    _settings: Settings | None = None

    def __getattr__(self, name: str):
        if self._settings is None:
            self._settings = get_settings()
        return getattr(self._settings, name)


# Convenience instance (lazy loaded)
settings = _SettingsProxy()
