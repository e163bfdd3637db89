"""Pytest configuration shared across the suite."""

from __future__ import annotations

import copy
from pathlib import Path

import pytest
from PIL import Image

SUBMARINER_PAYLOAD: dict = {
    "brand": "Rolex",
    "model": "Submariner",
    "estimatedValue": {"min": 9500, "max": 45000, "currency": "USD"},
    "authenticity": {
        "isAuthentic": True,
        "confidence": 85,
        "reasoning": "...",
        "redFlags": [],
        "authenticityIndicators": ["Ceramic bezel"],
    },
    "details": {"notableFeatures": []},
    "confidence": 90,
}


@pytest.fixture
def submariner_payload() -> dict:
    """A schema-valid analysis response for a Rolex Submariner."""
    return copy.deepcopy(SUBMARINER_PAYLOAD)


@pytest.fixture
def watch_photo(tmp_path: Path) -> Path:
    """A large PNG standing in for a captured watch photo."""
    path = tmp_path / "watch.png"
    Image.new("RGBA", (2048, 1536), (20, 40, 60, 255)).save(path, format="PNG")
    return path
