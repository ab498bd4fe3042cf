"""Application configuration powered by pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized strongly-typed configuration loaded from `.env`."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    PROJECT_NAME: str = "Counter Service"
    PROJECT_VERSION: str = "1.0.0"

    HOST: str = Field("127.0.0.1", description="Interface the HTTP listener binds to")
    PORT: int = Field(8080, ge=1, le=65535, description="TCP port the HTTP listener binds to")

    LOG_LEVEL: str = "INFO"
    # Per-request access lines come from uvicorn's access logger
    ACCESS_LOG: bool = True

    INITIAL_COUNT: int = Field(0, ge=0, description="Value the counter holds at startup")


@lru_cache
def get_settings() -> Settings:
    """Cache and return a singleton Settings instance to avoid re-parsing env."""
    return Settings()
