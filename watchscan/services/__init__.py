"""Service layer exports."""

from .image_encoding import EncodedImage, ImageEncoder
from .watch_analysis import (
    AnalysisRequest,
    WatchAnalysisService,
    build_analysis_prompt,
    parse_analysis_response,
    resolve_language,
)

__all__ = [
    "AnalysisRequest",
    "EncodedImage",
    "ImageEncoder",
    "WatchAnalysisService",
    "build_analysis_prompt",
    "parse_analysis_response",
    "resolve_language",
]
