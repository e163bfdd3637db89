"""
Application configuration models and helpers.

Centralizes settings management so the FastAPI app, the CLI script and
library callers share a consistent configuration surface.
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _load_env_file(path: str = ".env") -> None:
    """Best-effort load key=value pairs from a .env file without extra deps."""
    env_path = Path(path)
    if not env_path.exists():
        return
    for raw_line in env_path.read_text().splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key or key in os.environ:
            continue
        cleaned = value.strip().strip('"').strip("'")
        os.environ[key] = cleaned


_load_env_file()


class GeminiSettings(BaseSettings):
    """Configuration for Gemini model access."""

    api_key: str = Field(..., validation_alias="GEMINI_API_KEY")
    model_name: str = Field("gemini-1.5-flash", validation_alias="GEMINI_MODEL_NAME")
    request_timeout: float = Field(
        60.0,
        gt=0,
        validation_alias="GEMINI_REQUEST_TIMEOUT",
        description="Seconds a single analysis request may take before timing out.",
    )


class AnalysisSettings(BaseSettings):
    """Tunables for the image analysis pipeline."""

    default_language: str = Field("en", validation_alias="ANALYSIS_DEFAULT_LANGUAGE")
    image_fetch_timeout: float = Field(
        30.0,
        gt=0,
        validation_alias="ANALYSIS_IMAGE_FETCH_TIMEOUT",
        description="Seconds allowed for downloading a remote image reference.",
    )
    allow_remote_images: bool = Field(
        False,
        validation_alias="ANALYSIS_ALLOW_REMOTE_IMAGES",
        description="Let HTTP callers submit http(s) image URLs for the server to fetch.",
    )

    @field_validator("default_language")
    @classmethod
    def _normalize_language(cls, value: str) -> str:
        return value.strip().lower() or "en"


class AppSettings(BaseSettings):
    """Root settings object for the service."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    environment: str = Field("development", validation_alias="APP_ENV")
    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()  # type: ignore[call-arg]


__all__ = [
    "AnalysisSettings",
    "AppSettings",
    "GeminiSettings",
    "get_settings",
]
