"""Lightweight configuration for the rochambeau service."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_OPPONENT_API_URL = "https://5eddt4q9dk.execute-api.us-east-1.amazonaws.com/rps-stage/throw"


class Settings(BaseSettings):
    """Application settings read from the environment and ``.env``."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    opponent_api_url: str = Field(
        default=DEFAULT_OPPONENT_API_URL, description="Endpoint returning the opponent's throw"
    )
    opponent_connect_timeout: float = Field(
        default=5.0, description="Seconds allowed to establish the connection", gt=0.0
    )
    opponent_read_timeout: float = Field(
        default=10.0, description="Seconds allowed to wait for the response", gt=0.0
    )
    opponent_max_retries: int = Field(
        default=1, description="Retries after the first failed attempt", ge=0
    )
    opponent_verify_tls: bool = Field(
        default=True, description="Verify the opponent API's TLS certificate"
    )
    opponent_strategy: str = Field(
        default="remote", description="Strategy used to obtain the opponent's throw"
    )
    rules_file: Path | None = Field(
        default=None, description="JSON rule table replacing the built-in rules"
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )
    log_level: str = Field(default="INFO", description="Root logging level")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
