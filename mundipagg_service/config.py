from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore"
    )

    HTTP_PORT: int = 8000
    LOG_LEVEL: str = "INFO"
    MUNDIPAGG_API_KEY: str | None = Field(
        default=None,
        validation_alias=AliasChoices("MUNDIPAGG_API_KEY", "MUNDIPAGG_SECRET_KEY"),
    )
    MUNDIPAGG_BASE_URL: str | None = None
    MUNDIPAGG_TEST_MODE: bool = False
    DEFAULT_CURRENCY: str = "USD"
    REQUEST_TIMEOUT: float = 20.0


@lru_cache
def get_settings() -> Settings:
    """Get cached Settings instance."""
    return Settings()
