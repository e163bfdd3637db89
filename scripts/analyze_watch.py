#!/usr/bin/env python
"""Run a single watch analysis from the command line and print the JSON report."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from watchscan.clients import GeminiClient  # noqa: E402
from watchscan.core.config import get_settings  # noqa: E402
from watchscan.core.errors import AnalysisError  # noqa: E402
from watchscan.core.logging import configure_logging  # noqa: E402
from watchscan.knowledge import format_currency  # noqa: E402
from watchscan.schemas import WatchAnalysis  # noqa: E402
from watchscan.services import ImageEncoder, WatchAnalysisService  # noqa: E402

EXIT_OK = 0
EXIT_ANALYSIS_ERROR = 1


def _value_range(result: WatchAnalysis) -> str:
    value = result.estimated_value
    try:
        low = format_currency(value.min, value.currency)
        high = format_currency(value.max, value.currency)
    except ValueError:
        # Currency outside the rate table; show the bare code.
        return f"{value.min:,.0f} - {value.max:,.0f} {value.currency}"
    return f"{low} - {high}"


def _build_service(model_name: str | None) -> WatchAnalysisService:
    settings = get_settings()
    gemini_settings = settings.gemini
    if model_name:
        gemini_settings = gemini_settings.model_copy(update={"model_name": model_name})
    return WatchAnalysisService(
        GeminiClient(gemini_settings),
        encoder=ImageEncoder(fetch_timeout=settings.analysis.image_fetch_timeout),
        default_language=settings.analysis.default_language,
    )


async def run(
    service: WatchAnalysisService,
    image: str,
    language: str | None,
    currency: str | None,
) -> int:
    try:
        result = await service.analyze(image, language)
    except AnalysisError as exc:
        print(f"{exc.user_message} [{exc.kind.value}]", file=sys.stderr)
        return EXIT_ANALYSIS_ERROR
    if currency:
        try:
            result = result.in_currency(currency)
        except ValueError as exc:
            print(str(exc), file=sys.stderr)
            return EXIT_ANALYSIS_ERROR
    print(json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False))
    print(f"{result.brand} {result.model}: {_value_range(result)}", file=sys.stderr)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Identify, value and authenticate a watch from a photo."
    )
    parser.add_argument(
        "image",
        help="Path, file:// URI, http(s) URL or data: URI of the watch photo.",
    )
    parser.add_argument(
        "--language",
        default=None,
        help="Output language code (en, es, fr, ar, zh). Defaults to configuration.",
    )
    parser.add_argument(
        "--currency",
        default=None,
        help="Optional currency for the estimated value (e.g. EUR, GBP).",
    )
    parser.add_argument(
        "--model",
        dest="model",
        default=None,
        help="Optional override for the Gemini model name.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level override.")

    args = parser.parse_args(argv)
    configure_logging(args.log_level or get_settings().log_level)
    service = _build_service(args.model)
    return asyncio.run(run(service, args.image, args.language, args.currency))


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
