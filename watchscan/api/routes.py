"""
FastAPI routes for the watch analysis service.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException

from watchscan.core.config import AppSettings
from watchscan.core.errors import AnalysisError, AnalysisErrorKind
from watchscan.dependencies import (
    get_app_settings,
    get_image_encoder,
    get_watch_analysis_service,
)
from watchscan.knowledge import find_watch_by_reference, find_watches_by_brand
from watchscan.knowledge.catalog import WatchModel
from watchscan.schemas import AnalysisSubmission
from watchscan.services import ImageEncoder, WatchAnalysisService

router = APIRouter()
logger = logging.getLogger(__name__)


_STATUS_BY_KIND: dict[AnalysisErrorKind, HTTPStatus] = {
    AnalysisErrorKind.EMPTY_INPUT: HTTPStatus.BAD_REQUEST,
    AnalysisErrorKind.IMAGE_READ_FAILURE: HTTPStatus.UNPROCESSABLE_ENTITY,
    AnalysisErrorKind.RESPONSE_PARSE_FAILURE: HTTPStatus.BAD_GATEWAY,
    AnalysisErrorKind.EMPTY_RESULT: HTTPStatus.BAD_GATEWAY,
    AnalysisErrorKind.RATE_LIMITED: HTTPStatus.TOO_MANY_REQUESTS,
    AnalysisErrorKind.TIMEOUT: HTTPStatus.GATEWAY_TIMEOUT,
    AnalysisErrorKind.NETWORK_FAILURE: HTTPStatus.SERVICE_UNAVAILABLE,
    AnalysisErrorKind.CANCELLED: HTTPStatus.SERVICE_UNAVAILABLE,
    AnalysisErrorKind.UNCLASSIFIED: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def _catalog_entry(watch: WatchModel) -> dict[str, Any]:
    return {
        "brand": watch.brand,
        "model": watch.model,
        "referenceNumbers": list(watch.reference_numbers),
        "yearIntroduced": watch.year_introduced,
        "priceRange": {"min": watch.price_range[0], "max": watch.price_range[1]},
        "keyFeatures": list(watch.key_features),
        "materials": list(watch.materials),
        "movements": list(watch.movements),
    }


@router.get("/health", status_code=HTTPStatus.OK)
async def healthcheck(
    settings: Annotated[AppSettings, Depends(get_app_settings)],
) -> dict:
    """Simple health endpoint for monitoring."""
    return {"status": "ok", "environment": settings.environment}


@router.post("/analysis", status_code=HTTPStatus.OK)
async def analyze_watch(
    submission: AnalysisSubmission,
    service: Annotated[WatchAnalysisService, Depends(get_watch_analysis_service)],
    encoder: Annotated[ImageEncoder, Depends(get_image_encoder)],
) -> dict:
    """Analyse a watch photo and return the structured report."""
    try:
        encoder.check_reference(submission.image_uri)
    except AnalysisError as exc:
        logger.warning("Rejected image reference: %r", exc)
        raise HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail={"kind": exc.kind.value, "message": exc.message},
        ) from exc

    try:
        result = await service.analyze(submission.image_uri, submission.language)
    except AnalysisError as exc:
        logger.warning("Watch analysis failed: %r", exc)
        raise HTTPException(
            status_code=_STATUS_BY_KIND[exc.kind],
            detail={"kind": exc.kind.value, "message": exc.user_message},
        ) from exc

    if submission.currency:
        try:
            result = result.in_currency(submission.currency)
        except ValueError as exc:
            raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(exc)) from exc

    return result.model_dump(by_alias=True)


@router.get("/catalog/references/{reference}", status_code=HTTPStatus.OK)
async def lookup_reference(reference: str) -> dict:
    """Return the catalog model matching a reference number."""
    watch = find_watch_by_reference(reference)
    if watch is None:
        raise HTTPException(
            status_code=HTTPStatus.NOT_FOUND,
            detail=f"No catalog entry for reference '{reference}'.",
        )
    return _catalog_entry(watch)


@router.get("/catalog/brands/{brand}", status_code=HTTPStatus.OK)
async def list_brand_models(brand: str) -> list[dict]:
    """List catalog models for a brand (empty when the brand is unknown)."""
    return [_catalog_entry(watch) for watch in find_watches_by_brand(brand)]


__all__ = ["router"]
