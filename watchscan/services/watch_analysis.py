"""
Service that turns a watch photo into a validated :class:`WatchAnalysis`.

The pipeline normalizes the photo (best effort), encodes it, builds a prompt
grounded in the static watch catalog, and asks Gemini for a JSON report.
Transient failures are retried with linear backoff; everything else surfaces
as a classified :class:`AnalysisError`.
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
import os
import re
from dataclasses import dataclass, field
from functools import lru_cache
from textwrap import dedent
from typing import Any, Awaitable, Callable, Mapping, Optional, Protocol, TypeVar, Union

from pydantic import ValidationError

from watchscan.clients.gemini import classify_gemini_error
from watchscan.core.errors import AnalysisError, AnalysisErrorKind
from watchscan.knowledge import build_knowledge_context
from watchscan.schemas import WatchAnalysis
from watchscan.services.image_encoding import ImageEncoder
from watchscan.utils.images import is_local_reference, shrink_image
from watchscan.utils.retry import RetryConfig, call_with_retry

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_ATTEMPTS = 3
BACKOFF_SECONDS = 1.0

LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "ar": "Arabic",
    "zh": "Chinese",
}
DEFAULT_LANGUAGE_NAME = LANGUAGE_NAMES["en"]

# Markdown code fence around the JSON body, closing fence optional.
_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*(?:```)?$", re.DOTALL | re.IGNORECASE)

_ANALYSIS_INSTRUCTIONS = dedent(
    """\
    You are an expert luxury watch authenticator and appraiser with decades of experience. Analyze this watch image carefully and thoroughly.

    {knowledge}

    IMPORTANT INSTRUCTIONS:
    1. ALWAYS attempt to identify the watch, even if the image quality is not perfect
    2. Look for ANY visible features: brand logos, dial design, case shape, crown, hands, markers, bezel
    3. If you can see any part of a watch, provide your best analysis
    4. Only set confidence to 0 if there is absolutely NO watch visible in the image
    5. CRITICAL: The Rolex Land-Dweller is a REAL watch model released in 2025. It features 36mm and 40mm case sizes, integrated bracelet design, 5 Hz high frequency Cal. 7135 movement, and fluid case lines. Reference numbers include 127334, 127335, 127336, 127234, 127235, 127236. DO NOT mark it as fake or non-existent.
    6. Always check the watch database for new 2025 models before determining authenticity

    Examine these elements:
    1. Brand identification - look for logos on dial, crown, clasp, case back
    2. Model identification - dial layout, bezel style, case shape, complications
    3. Reference number if any text is visible
    4. Materials assessment - steel, gold, ceramic, etc.
    5. Dial details - color, texture, indices, hands style
    6. Case construction - shape, size estimation, lugs style
    7. Crown design and position
    8. Authenticity indicators vs replica warning signs
    9. Market value estimation (use 2024-2025 pricing, in USD)
    10. Movement type if visible

    Use the watch database to match visible features against known models. Even partial matches are valuable.

    Authenticity Assessment:
    - Look for finishing quality, font consistency, alignment
    - Check logo positioning and quality
    - Assess overall build quality from visible details
    - Note any suspicious elements
    - Before marking ANY watch as fake, verify it's not a new model released in 2024-2025

    Even with partial visibility or suboptimal lighting:
    - Provide your BEST identification attempt
    - Set confidence appropriately (30-70% for unclear images)
    - List what features you CAN identify
    - Suggest what additional angles would help

    Only mark as unidentifiable (confidence 0) if:
    - No watch is present in the image
    - Image is completely black/white/corrupted
    - Only non-watch objects are visible

    Respond strictly in JSON matching this JSON schema. Do not include prose outside the JSON object.
    {schema}

    IMPORTANT: Respond in {language} language. All analysis, reasoning, descriptions, and notes must be in {language}.
    """
)


class AnalysisBackend(Protocol):
    async def generate_watch_analysis(
        self, *, prompt: str, image_base64: str, mime_type: str
    ) -> Union[str, Mapping[str, Any]]: ...


Normalizer = Callable[[str], str]
Sleep = Callable[[float], Awaitable[object]]


@dataclass
class AnalysisRequest:
    """Everything sent to the model for one analysis call."""

    encoded_image: str
    mime_type: str
    language: str
    language_name: str
    prompt: str
    image_bytes: bytes = field(default=b"", repr=False)


def resolve_language(code: Optional[str]) -> tuple[str, str]:
    """Map a language code (``es``, ``es-MX``...) to ``(code, display name)``."""
    cleaned = (code or "").strip().lower().replace("_", "-")
    primary = cleaned.split("-", 1)[0]
    if primary in LANGUAGE_NAMES:
        return primary, LANGUAGE_NAMES[primary]
    return "en", DEFAULT_LANGUAGE_NAME


@lru_cache()
def _response_schema_text() -> str:
    return json.dumps(WatchAnalysis.model_json_schema(by_alias=True), indent=2)


def build_analysis_prompt(language_name: str, knowledge: Optional[str] = None) -> str:
    """Assemble instructions, catalog context, schema and language directive."""
    return _ANALYSIS_INSTRUCTIONS.format(
        knowledge=knowledge if knowledge is not None else build_knowledge_context(),
        schema=_response_schema_text(),
        language=language_name,
    )


def parse_analysis_response(payload: Union[str, Mapping[str, Any], None]) -> WatchAnalysis:
    """Validate a model response, raising a classified error when unusable."""
    if isinstance(payload, Mapping):
        data: Any = payload
    else:
        text = (payload or "").strip()
        if not text:
            raise AnalysisError(AnalysisErrorKind.EMPTY_RESULT, "AI service returned empty result")
        fenced = _CODE_FENCE.match(text)
        if fenced:
            text = fenced.group(1)
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise AnalysisError(
                AnalysisErrorKind.RESPONSE_PARSE_FAILURE, f"JSON parse error: {exc}"
            ) from exc

    if data is None:
        raise AnalysisError(AnalysisErrorKind.EMPTY_RESULT, "AI service returned empty result")
    try:
        return WatchAnalysis.model_validate(data)
    except ValidationError as exc:
        raise AnalysisError(
            AnalysisErrorKind.RESPONSE_PARSE_FAILURE,
            f"Response does not match the analysis schema: {exc.error_count()} error(s)",
        ) from exc


class WatchAnalysisService:
    """Drive one "analyze this photo" operation to a result or a classified error."""

    def __init__(
        self,
        backend: AnalysisBackend,
        *,
        encoder: Optional[ImageEncoder] = None,
        normalizer: Optional[Normalizer] = None,
        sleep: Sleep = asyncio.sleep,
        default_language: str = "en",
    ) -> None:
        self._backend = backend
        self._encoder = encoder or ImageEncoder()
        self._normalizer = normalizer or shrink_image
        self._sleep = sleep
        self._default_language = default_language
        self._retry_config = RetryConfig(attempts=MAX_ATTEMPTS, backoff_seconds=BACKOFF_SECONDS)

    async def analyze(
        self,
        image_ref: str,
        language: Optional[str] = None,
        *,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> WatchAnalysis:
        """Analyse the photo at ``image_ref`` and return the validated report.

        Setting ``cancel_event`` while an attempt or a backoff wait is pending
        aborts the call with a ``cancelled`` error.
        """
        if not image_ref or not image_ref.strip():
            raise AnalysisError(AnalysisErrorKind.EMPTY_INPUT, "No image reference provided")

        language_code, language_name = resolve_language(language or self._default_language)
        logger.info(
            "Starting watch analysis for %s (language=%s)", _describe(image_ref), language_code
        )

        self._encoder.check_reference(image_ref)
        working_ref = await self._normalize(image_ref)
        try:
            encoded = await self._encoder.encode(working_ref)
        except AnalysisError:
            raise
        except Exception as exc:
            raise AnalysisError(
                AnalysisErrorKind.IMAGE_READ_FAILURE, f"Failed to process image: {exc}"
            ) from exc
        finally:
            if working_ref != image_ref:
                _discard(working_ref)

        if not encoded.data:
            raise AnalysisError(AnalysisErrorKind.EMPTY_INPUT, "Encoded image is empty")
        logger.info(
            "Encoded image: %d bytes, %d base64 characters", encoded.size_bytes, len(encoded.data)
        )

        request = AnalysisRequest(
            encoded_image=encoded.data,
            mime_type=encoded.mime_type,
            language=language_code,
            language_name=language_name,
            prompt=build_analysis_prompt(language_name),
            image_bytes=encoded.raw,
        )
        result = await self.analyze_request(request, cancel_event=cancel_event)
        logger.info(
            "Analysis completed: %s %s (confidence=%s, authentic=%s)",
            result.brand,
            result.model,
            result.confidence,
            result.authenticity.is_authentic,
        )
        return result

    async def analyze_request(
        self,
        request: AnalysisRequest,
        *,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> WatchAnalysis:
        """Send an already-built request, retrying transient failures."""
        if not request.encoded_image:
            raise AnalysisError(AnalysisErrorKind.EMPTY_INPUT, "Encoded image is empty")

        async def _attempt(attempt: int) -> WatchAnalysis:
            logger.info("Analysis attempt %d/%d", attempt, MAX_ATTEMPTS)
            return await _until_cancelled(self._request_once(request), cancel_event)

        async def _sleep(delay: float) -> None:
            await _until_cancelled(self._sleep(delay), cancel_event)

        return await call_with_retry(_attempt, retry_config=self._retry_config, sleep=_sleep)

    async def _request_once(self, request: AnalysisRequest) -> WatchAnalysis:
        try:
            payload = await self._backend.generate_watch_analysis(
                prompt=request.prompt,
                image_base64=request.encoded_image,
                mime_type=request.mime_type,
            )
        except AnalysisError as exc:
            logger.warning("Analysis request failed: %r", exc)
            raise
        except Exception as exc:
            error = classify_gemini_error(exc)
            logger.warning("Analysis request failed: %r", error)
            raise error from exc
        return parse_analysis_response(payload)

    async def _normalize(self, image_ref: str) -> str:
        """Return a downsized copy of a local image, or ``image_ref`` on any failure."""
        if not is_local_reference(image_ref):
            return image_ref
        try:
            normalized = await asyncio.to_thread(self._normalizer, image_ref)
        except Exception as exc:
            logger.warning("Image optimization failed, using original: %s", exc)
            return image_ref
        logger.debug("Image optimized: %s", normalized)
        return normalized or image_ref


async def _until_cancelled(
    awaitable: Awaitable[T], cancel_event: Optional[asyncio.Event]
) -> T:
    """Await ``awaitable`` unless ``cancel_event`` fires first."""
    if cancel_event is None:
        return await awaitable
    if cancel_event.is_set():
        if asyncio.iscoroutine(awaitable):
            awaitable.close()
        raise AnalysisError(AnalysisErrorKind.CANCELLED, "Analysis cancelled")

    task = asyncio.ensure_future(awaitable)
    waiter = asyncio.ensure_future(cancel_event.wait())
    try:
        await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        task.cancel()
        raise
    finally:
        waiter.cancel()
    if task.done():
        return task.result()
    task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await task
    raise AnalysisError(AnalysisErrorKind.CANCELLED, "Analysis cancelled")


def _describe(reference: str) -> str:
    if reference.startswith("data:"):
        return f"data URI ({len(reference)} chars)"
    return reference


def _discard(path: str) -> None:
    try:
        os.unlink(path)
    except OSError as exc:
        logger.debug("Could not remove temporary image %s: %s", path, exc)


__all__ = [
    "AnalysisBackend",
    "AnalysisRequest",
    "LANGUAGE_NAMES",
    "MAX_ATTEMPTS",
    "WatchAnalysisService",
    "build_analysis_prompt",
    "parse_analysis_response",
    "resolve_language",
]
