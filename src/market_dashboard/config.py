"""Application settings loaded from the environment (and optional .env file)."""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the dashboard backend.

    The upstream API key is read from SERP_API_KEY. An empty key is allowed at
    startup; requests that need the upstream fail with a configuration error.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    serp_api_key: str = Field(default="")
    serp_api_url: str = Field(default="https://serpapi.com/search.json")
    stock_timeout_seconds: float = Field(default=10.0, gt=0)
    markets_timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default="Mozilla/5.0 (compatible; MarketBot/1.0)")
    log_level: str = Field(default="INFO")
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8001)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
