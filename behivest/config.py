"""Environment-driven settings for the calculator API."""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Calculator API configuration, read from ``BEHIVEST_*`` variables."""

    log_level: str = "INFO"
    api_prefix: str = "/api"

    # Astro dev server and the Vite preview port
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:4321",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]
    )

    host: str = "127.0.0.1"
    port: int = 5000

    model_config = SettingsConfigDict(
        env_prefix="BEHIVEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
