"""Expose dependency helpers for FastAPI routers."""

from .clients import (
    get_gemini_client,
    get_image_encoder,
    get_watch_analysis_service,
)
from .config import get_app_settings

__all__ = [
    "get_app_settings",
    "get_gemini_client",
    "get_image_encoder",
    "get_watch_analysis_service",
]
