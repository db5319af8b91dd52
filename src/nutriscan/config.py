"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutriscan.services.matching import MatchMode

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

_WORD_MODE_ALIASES = {"word", "words", "word-boundary", "word_boundary"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    off_base_url: str = "https://world.openfoodfacts.org"
    off_user_agent: str = "NutriScan/0.1 (nutriscan@example.com)"
    match_mode: str = "substring"
    product_ttl_seconds: int = 86400
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="NUTRISCAN_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_match_mode(raw: str | None) -> MatchMode:
    """Parse the ingredient matching mode from env."""
    if raw is None:
        return "substring"
    if raw.strip().lower() in _WORD_MODE_ALIASES:
        return "word"
    return "substring"
