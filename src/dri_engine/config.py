"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    api_token: str | None = None
    default_nutrient_ids: str | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_nutrient_ids(raw: str | None) -> list[str] | None:
    """Parse a comma separated nutrient id list; None means every nutrient."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return None
    ids: list[str] = []
    for chunk in cleaned.split(","):
        value = chunk.strip()
        if not value or value in ids:
            continue
        ids.append(value)
    return ids or None
