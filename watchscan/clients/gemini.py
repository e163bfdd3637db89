"""Client wrapper for the Gemini multimodal model used to analyse watch photos."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Iterable

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from watchscan.core.config import GeminiSettings
from watchscan.core.errors import AnalysisError, AnalysisErrorKind

_VISION_FALLBACKS: tuple[str, ...] = (
    "gemini-1.5-flash",
    "gemini-1.5-pro",
)

logger = logging.getLogger(__name__)


def classify_gemini_error(exc: BaseException) -> AnalysisError:
    """Translate an SDK or transport exception into a tagged analysis error."""
    if isinstance(exc, AnalysisError):
        return exc
    message = str(exc) or type(exc).__name__
    if isinstance(exc, (google_exceptions.TooManyRequests, google_exceptions.ResourceExhausted)):
        return AnalysisError(AnalysisErrorKind.RATE_LIMITED, message)
    if isinstance(
        exc,
        (google_exceptions.DeadlineExceeded, google_exceptions.GatewayTimeout, TimeoutError),
    ):
        return AnalysisError(AnalysisErrorKind.TIMEOUT, message)
    if isinstance(exc, (google_exceptions.ServiceUnavailable, ConnectionError)):
        return AnalysisError(AnalysisErrorKind.NETWORK_FAILURE, message)
    return AnalysisError(AnalysisErrorKind.UNCLASSIFIED, message)


class GeminiClient:
    """Send an image plus instructions to Gemini and return the raw JSON text."""

    def __init__(self, settings: GeminiSettings) -> None:
        self._settings = settings
        # Configure the global client once per process.
        genai.configure(api_key=settings.api_key)

    async def generate_watch_analysis(
        self,
        *,
        prompt: str,
        image_base64: str,
        mime_type: str = "image/jpeg",
    ) -> str:
        """Run one analysis request; failures are raised as :class:`AnalysisError`."""

        def _invoke() -> str:
            response = self._invoke_with_models(
                models=self._vision_model_candidates(),
                call=lambda model: model.generate_content(
                    [
                        {"mime_type": mime_type, "data": image_base64},
                        prompt,
                    ],
                    generation_config={"response_mime_type": "application/json"},
                    request_options={"timeout": self._settings.request_timeout},
                ),
            )
            return _response_text(response)

        try:
            return await asyncio.wait_for(
                asyncio.to_thread(_invoke),
                timeout=self._settings.request_timeout,
            )
        except Exception as exc:  # pragma: no cover - network call
            raise classify_gemini_error(exc) from exc

    def _invoke_with_models(
        self,
        *,
        models: Iterable[str],
        call: Callable[[genai.GenerativeModel], Any],
    ) -> Any:
        """Try the configured model followed by fallbacks when available."""

        model_sequence = list(models)
        last_not_found: google_exceptions.NotFound | None = None
        for index, model_name in enumerate(model_sequence):
            generative_model = genai.GenerativeModel(model_name)
            try:
                return call(generative_model)
            except google_exceptions.NotFound as exc:  # pragma: no cover - network call
                last_not_found = exc
                logger.warning(
                    "Gemini model '%s' not found (attempt %d/%d); trying fallback.",
                    model_name,
                    index + 1,
                    len(model_sequence),
                )
                continue

        primary = model_sequence[0] if model_sequence else "unknown"
        raise AnalysisError(
            AnalysisErrorKind.UNCLASSIFIED,
            f"Gemini model '{primary}' is not available. "
            "Update GEMINI_MODEL_NAME to a supported value.",
        ) from last_not_found

    def _vision_model_candidates(self) -> list[str]:
        return self._collect_candidates(self._settings.model_name, _VISION_FALLBACKS)

    @staticmethod
    def _collect_candidates(
        configured: str | None,
        fallbacks: tuple[str, ...],
    ) -> list[str]:
        """Return distinct model names prioritizing the configured value."""
        seen: set[str] = set()
        candidates: list[str] = []
        for name in (configured, *fallbacks):
            if not name:
                continue
            cleaned = name.strip()
            if not cleaned or cleaned in seen:
                continue
            seen.add(cleaned)
            candidates.append(cleaned)
        return candidates


def _response_text(response: Any) -> str:
    """Return the response text, or an empty string when nothing was generated."""
    try:
        return response.text or ""
    except ValueError:
        # Raised by the SDK when the candidate has no parts (e.g. safety block).
        feedback = getattr(response, "prompt_feedback", None)
        logger.warning("Gemini returned no content; feedback=%s", feedback)
        return ""


__all__ = ["GeminiClient", "classify_gemini_error"]
