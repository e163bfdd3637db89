"""
Factory functions to provide shared clients and services as FastAPI dependencies.
"""

from functools import lru_cache

from watchscan.clients import GeminiClient
from watchscan.core.config import get_settings
from watchscan.services import ImageEncoder, WatchAnalysisService


@lru_cache()
def _settings():
    """Internal helper to cache settings for client factories."""
    return get_settings()


@lru_cache()
def get_gemini_client() -> GeminiClient:
    """Provide Gemini client instance."""
    settings = _settings()
    return GeminiClient(settings.gemini)


@lru_cache()
def get_image_encoder() -> ImageEncoder:
    """Provide the encoder for HTTP callers: data URIs only, URLs when enabled."""
    settings = _settings()
    return ImageEncoder(
        fetch_timeout=settings.analysis.image_fetch_timeout,
        allow_local=False,
        allow_remote=settings.analysis.allow_remote_images,
    )


def get_watch_analysis_service() -> WatchAnalysisService:
    """Build a watch analysis service backed by Gemini."""
    settings = _settings()
    return WatchAnalysisService(
        get_gemini_client(),
        encoder=get_image_encoder(),
        default_language=settings.analysis.default_language,
    )


__all__ = [
    "get_gemini_client",
    "get_image_encoder",
    "get_watch_analysis_service",
]
