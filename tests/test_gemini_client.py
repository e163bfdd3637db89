try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import pytest
from google.api_core import exceptions as google_exceptions

from watchscan.clients.gemini import GeminiClient, _response_text, classify_gemini_error
from watchscan.core.errors import AnalysisError, AnalysisErrorKind


@pytest.mark.parametrize(
    ("exc", "kind"),
    [
        (google_exceptions.TooManyRequests("rate limit"), AnalysisErrorKind.RATE_LIMITED),
        (google_exceptions.ResourceExhausted("quota"), AnalysisErrorKind.RATE_LIMITED),
        (google_exceptions.DeadlineExceeded("deadline"), AnalysisErrorKind.TIMEOUT),
        (google_exceptions.GatewayTimeout("gateway"), AnalysisErrorKind.TIMEOUT),
        (TimeoutError(), AnalysisErrorKind.TIMEOUT),
        (google_exceptions.ServiceUnavailable("unavailable"), AnalysisErrorKind.NETWORK_FAILURE),
        (ConnectionResetError("reset"), AnalysisErrorKind.NETWORK_FAILURE),
        (google_exceptions.InternalServerError("oops"), AnalysisErrorKind.UNCLASSIFIED),
        (ValueError("odd"), AnalysisErrorKind.UNCLASSIFIED),
    ],
)
def test_classify_gemini_error(exc, kind):
    error = classify_gemini_error(exc)

    assert isinstance(error, AnalysisError)
    assert error.kind is kind
    assert error.message


def test_classify_gemini_error_passes_through_tagged_errors():
    original = AnalysisError(AnalysisErrorKind.EMPTY_RESULT, "nothing")

    assert classify_gemini_error(original) is original


def test_retryability_follows_kind():
    assert classify_gemini_error(TimeoutError()).retryable
    assert classify_gemini_error(google_exceptions.TooManyRequests("x")).retryable
    assert not classify_gemini_error(ConnectionError("x")).retryable


def test_collect_candidates_deduplicates_and_prioritizes_configured():
    candidates = GeminiClient._collect_candidates(
        " gemini-2.0-flash ", ("gemini-1.5-flash", "gemini-2.0-flash", "")
    )

    assert candidates == ["gemini-2.0-flash", "gemini-1.5-flash"]


def test_response_text_handles_blocked_candidates():
    class Blocked:
        prompt_feedback = "SAFETY"

        @property
        def text(self) -> str:
            raise ValueError("no parts")

    class Answered:
        text = '{"brand": "Omega"}'

    assert _response_text(Blocked()) == ""
    assert _response_text(Answered()) == '{"brand": "Omega"}'
