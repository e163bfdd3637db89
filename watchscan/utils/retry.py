"""Retry helper with linear backoff for classified analysis errors."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from watchscan.core.errors import AnalysisError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RetryConfig:
    def __init__(self, *, attempts: int = 3, backoff_seconds: float = 1.0) -> None:
        if attempts < 1:
            raise ValueError("attempts must be at least 1")
        self.attempts = attempts
        self.backoff_seconds = backoff_seconds

    def delay_for(self, attempt: int) -> float:
        """Seconds to wait after the failed ``attempt`` (1-based)."""
        return self.backoff_seconds * attempt


async def call_with_retry(
    func: Callable[[int], Awaitable[T]],
    *,
    retry_config: RetryConfig | None = None,
    sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
) -> T:
    """Await ``func(attempt)`` until it succeeds or a non-retryable error occurs.

    Only :class:`AnalysisError` instances whose kind is retryable are retried;
    everything else propagates on first occurrence. When the attempt budget is
    exhausted the last error is raised.
    """
    config = retry_config or RetryConfig()
    attempt = 0
    last_error: AnalysisError | None = None

    while attempt < config.attempts:
        attempt += 1
        try:
            return await func(attempt)
        except AnalysisError as exc:
            last_error = exc
            if not exc.retryable:
                raise
            if attempt >= config.attempts:
                break
            delay = config.delay_for(attempt)
            logger.info(
                "Retryable %s on attempt %d/%d; waiting %.1fs before retry.",
                exc.kind.value,
                attempt,
                config.attempts,
                delay,
            )
            await sleep(delay)

    if last_error is not None:
        logger.warning(
            "Giving up after %d attempts; last error: %s",
            config.attempts,
            last_error.kind.value,
        )
        raise last_error
    raise RuntimeError("Retry loop exited without raising an exception")


__all__ = ["RetryConfig", "call_with_retry"]
