"""Analyzer configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Reading speed used when the NLP oracle cannot estimate reading time
DEFAULT_READING_WPM = 200


class Settings(BaseSettings):
    """Analyzer settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SEOKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Analysis
    reading_words_per_minute: int = DEFAULT_READING_WPM

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.env == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
