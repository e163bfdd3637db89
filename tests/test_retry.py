try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import pytest

from watchscan.core.errors import AnalysisError, AnalysisErrorKind
from watchscan.utils.retry import RetryConfig, call_with_retry


class Recorder:
    def __init__(self, failures: list[BaseException]) -> None:
        self.failures = failures
        self.attempts: list[int] = []
        self.delays: list[float] = []

    async def call(self, attempt: int) -> str:
        self.attempts.append(attempt)
        if self.failures:
            raise self.failures.pop(0)
        return "ok"

    async def sleep(self, delay: float) -> None:
        self.delays.append(delay)


def test_retry_config_linear_delays():
    config = RetryConfig(attempts=4, backoff_seconds=0.5)

    assert [config.delay_for(n) for n in (1, 2, 3)] == [0.5, 1.0, 1.5]


def test_retry_config_requires_an_attempt():
    with pytest.raises(ValueError):
        RetryConfig(attempts=0)


@pytest.mark.asyncio
async def test_call_with_retry_returns_after_transient_failures():
    recorder = Recorder(
        [
            AnalysisError(AnalysisErrorKind.TIMEOUT, "timed out"),
            AnalysisError(AnalysisErrorKind.RATE_LIMITED, "slow down"),
        ]
    )

    result = await call_with_retry(recorder.call, sleep=recorder.sleep)

    assert result == "ok"
    assert recorder.attempts == [1, 2, 3]
    assert recorder.delays == [1.0, 2.0]


@pytest.mark.asyncio
async def test_call_with_retry_raises_last_error_when_exhausted():
    errors = [
        AnalysisError(AnalysisErrorKind.TIMEOUT, "first"),
        AnalysisError(AnalysisErrorKind.TIMEOUT, "second"),
    ]
    recorder = Recorder(list(errors))

    with pytest.raises(AnalysisError) as excinfo:
        await call_with_retry(
            recorder.call,
            retry_config=RetryConfig(attempts=2),
            sleep=recorder.sleep,
        )

    assert excinfo.value is errors[-1]
    assert recorder.delays == [1.0]


@pytest.mark.asyncio
async def test_call_with_retry_propagates_terminal_errors_immediately():
    recorder = Recorder([AnalysisError(AnalysisErrorKind.EMPTY_RESULT, "nothing")])

    with pytest.raises(AnalysisError):
        await call_with_retry(recorder.call, sleep=recorder.sleep)

    assert recorder.attempts == [1]
    assert recorder.delays == []


@pytest.mark.asyncio
async def test_call_with_retry_does_not_catch_foreign_exceptions():
    recorder = Recorder([RuntimeError("bug")])

    with pytest.raises(RuntimeError, match="bug"):
        await call_with_retry(recorder.call, sleep=recorder.sleep)

    assert recorder.attempts == [1]
