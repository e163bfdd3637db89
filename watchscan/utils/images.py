"""Image helpers: reference parsing, downsizing and MIME sniffing."""

from __future__ import annotations

import io
import os
import tempfile
from pathlib import Path
from urllib.parse import unquote, urlparse

from PIL import Image

MAX_DIMENSION = 1024
JPEG_QUALITY = 90
DEFAULT_MIME_TYPE = "image/jpeg"


def is_local_reference(reference: str) -> bool:
    """True when ``reference`` names a file on this machine."""
    scheme = urlparse(reference).scheme.lower()
    # Single-letter schemes are Windows drive letters.
    return scheme in ("", "file") or len(scheme) == 1


def local_path(reference: str) -> Path:
    """Resolve a plain path or ``file://`` URI to a :class:`Path`."""
    parsed = urlparse(reference)
    if parsed.scheme.lower() == "file":
        return Path(unquote(parsed.path))
    return Path(reference).expanduser()


def shrink_image(
    reference: str,
    *,
    max_dimension: int = MAX_DIMENSION,
    quality: int = JPEG_QUALITY,
) -> str:
    """Write a JPEG copy of ``reference`` no larger than ``max_dimension``.

    Returns the path of a new temporary file; the caller owns it. Images that
    are already small enough are re-encoded but never upscaled. Errors from
    Pillow or the filesystem propagate.
    """
    source = local_path(reference)
    with Image.open(source) as img:
        img.thumbnail((max_dimension, max_dimension), Image.Resampling.LANCZOS)
        if img.mode != "RGB":
            img = img.convert("RGB")
        fd, target = tempfile.mkstemp(prefix="watchscan-", suffix=".jpg")
        try:
            with os.fdopen(fd, "wb") as handle:
                img.save(handle, format="JPEG", quality=quality, optimize=True)
        except Exception:
            os.unlink(target)
            raise
    return target


def sniff_mime_type(data: bytes) -> str:
    """Detect the image MIME type from its bytes, defaulting to JPEG."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            return Image.MIME.get(img.format or "", DEFAULT_MIME_TYPE)
    except (OSError, ValueError):
        return DEFAULT_MIME_TYPE


__all__ = [
    "DEFAULT_MIME_TYPE",
    "JPEG_QUALITY",
    "MAX_DIMENSION",
    "is_local_reference",
    "local_path",
    "shrink_image",
    "sniff_mime_type",
]
