from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application-wide settings populated from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TEMPCONV_",
        extra="ignore",
    )

    output_format: str | None = None
    verbose: bool = False
    exit_word: str = "exit"
