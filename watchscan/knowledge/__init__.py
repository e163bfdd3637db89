"""Static watch reference data used to ground analyses."""

from .catalog import (
    LUXURY_WATCH_CATALOG,
    WatchModel,
    find_watch_by_reference,
    find_watches_by_brand,
)
from .context import build_knowledge_context
from .currencies import convert_currency, format_currency

__all__ = [
    "LUXURY_WATCH_CATALOG",
    "WatchModel",
    "build_knowledge_context",
    "convert_currency",
    "find_watch_by_reference",
    "find_watches_by_brand",
    "format_currency",
]
