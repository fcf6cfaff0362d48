"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    generation_provider: Literal["gemini", "openai"] = "gemini"
    gemini_api_key: str | None = None
    gemini_text_model: str = "gemini-2.5-flash"
    gemini_image_model: str = "gemini-2.5-flash-image"
    openai_api_key: str | None = None
    openai_text_model: str = "gpt-5.2"
    openai_image_model: str = "gpt-image-1"
    request_timeout_seconds: int = 300
    auto_prompt_language: str = "English"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def require_api_key(settings: Settings) -> str:
    """Return the API key of the configured provider."""
    if settings.generation_provider == "openai":
        key, variable = settings.openai_api_key, "OPENAI_API_KEY"
    else:
        key, variable = settings.gemini_api_key, "GEMINI_API_KEY"
    cleaned = (key or "").strip()
    if not cleaned:
        raise ValueError(
            f"{variable} must be set for the {settings.generation_provider} provider"
        )
    return cleaned
