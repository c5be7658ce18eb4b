"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from dough_calculator.services.dough import POOLISH_CAP_NOTE, SALT_RULE

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    debug: bool = False
    cors_allowed_origins: str | None = None
    salt_rule_text: str = SALT_RULE
    poolish_cap_note: str = POOLISH_CAP_NOTE
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> list[str] | None:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned == "":
        return None
    if cleaned == "*":
        return ["*"]
    origins: list[str] = []
    for chunk in cleaned.split(","):
        value = chunk.strip().rstrip("/")
        if not value or value in origins:
            continue
        origins.append(value)
    return origins or None
