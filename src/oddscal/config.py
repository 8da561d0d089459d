"""Configuration from environment (ODDSCAL_* or .env). Tunes the run; never changes report content."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings. Load from env; validate on access."""

    model_config = SettingsConfigDict(
        env_prefix="ODDSCAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False, description="Human-readable console logs at DEBUG level"
    )
    max_workers: int | None = Field(
        default=None,
        ge=1,
        le=256,
        description="Aggregation thread pool size (default: CPU count)",
    )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
