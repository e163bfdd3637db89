"""Read an image reference and encode its bytes for the analysis request."""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional
from urllib.parse import unquote_to_bytes, urlparse

import httpx

from watchscan.core.errors import AnalysisError, AnalysisErrorKind
from watchscan.utils.images import is_local_reference, local_path, sniff_mime_type

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EncodedImage:
    """Base64 payload plus the metadata the model request needs."""

    data: str
    mime_type: str
    raw: bytes = field(repr=False)

    @property
    def size_bytes(self) -> int:
        return len(self.raw)


def _read_failure(message: str) -> AnalysisError:
    return AnalysisError(AnalysisErrorKind.IMAGE_READ_FAILURE, message)


class ImageEncoder:
    """Obtain image bytes from a path, file/data URI or HTTP URL and base64 them.

    ``allow_local`` and ``allow_remote`` restrict which references are read;
    ``data:`` URIs are always accepted. Encoders that serve untrusted callers
    should disable both.
    """

    def __init__(
        self,
        *,
        fetch_timeout: float = 30.0,
        http_client_factory: Optional[Callable[[], httpx.AsyncClient]] = None,
        allow_local: bool = True,
        allow_remote: bool = True,
    ) -> None:
        self._fetch_timeout = fetch_timeout
        self.allow_local = allow_local
        self.allow_remote = allow_remote
        self._client_factory = http_client_factory or (
            lambda: httpx.AsyncClient(timeout=self._fetch_timeout, follow_redirects=True)
        )

    async def encode(self, reference: str) -> EncodedImage:
        raw = await self.read_bytes(reference)
        if not raw:
            raise _read_failure("Image file is empty")

        data = base64.b64encode(raw).decode("ascii")
        if not data:
            raise _read_failure("Image conversion resulted in empty data")

        mime_type = sniff_mime_type(raw)
        logger.debug("Encoded %d bytes as %s (%d base64 chars)", len(raw), mime_type, len(data))
        return EncodedImage(data=data, mime_type=mime_type, raw=raw)

    def check_reference(self, reference: str) -> None:
        """Raise ``image_read_failure`` for references this encoder may not read."""
        scheme = urlparse(reference).scheme.lower()
        if scheme in ("http", "https") and not self.allow_remote:
            raise _read_failure("Remote image URLs are not accepted; send the image as a data URI")
        if not self.allow_local and is_local_reference(reference):
            raise _read_failure("Local image paths are not accepted; send the image as a data URI")

    async def read_bytes(self, reference: str) -> bytes:
        self.check_reference(reference)
        scheme = urlparse(reference).scheme.lower()
        if scheme == "data":
            return _decode_data_uri(reference)
        if scheme in ("http", "https"):
            return await self._fetch(reference)
        if is_local_reference(reference):
            return await asyncio.to_thread(_read_file, reference)
        raise _read_failure(f"Unsupported image reference scheme: {scheme!r}")

    async def _fetch(self, url: str) -> bytes:
        try:
            async with self._client_factory() as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            raise _read_failure(f"Failed to fetch image: {exc}") from exc
        if response.is_error:
            raise _read_failure(
                f"Failed to fetch image: {response.status_code} {response.reason_phrase}"
            )
        return response.content


def _read_file(reference: str) -> bytes:
    path = local_path(reference)
    if not path.exists():
        raise _read_failure(f"Image file does not exist: {path}")
    if not path.is_file():
        raise _read_failure(f"Image reference is not a file: {path}")
    try:
        return path.read_bytes()
    except OSError as exc:
        raise _read_failure(f"Image file is unreadable: {exc}") from exc


def _decode_data_uri(reference: str) -> bytes:
    header, sep, payload = reference.partition(",")
    if not sep:
        raise _read_failure("Invalid data URI: missing payload separator")
    if header.lower().endswith(";base64"):
        try:
            return base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise _read_failure(f"Invalid base64 data: {exc}") from exc
    return unquote_to_bytes(payload)


__all__ = ["EncodedImage", "ImageEncoder"]
