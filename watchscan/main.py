"""
FastAPI application entrypoint for the watch analysis service.
"""

from __future__ import annotations

from fastapi import FastAPI

from watchscan.api.routes import router as api_router
from watchscan.core.config import get_settings
from watchscan.core.logging import configure_logging


def create_app() -> FastAPI:
    """Factory for the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Watch Analysis Service",
        version="0.1.0",
        description="Identify, value and authenticate luxury watches from a photo.",
    )
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()

__all__ = ["app", "create_app"]
