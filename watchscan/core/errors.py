"""Classified errors surfaced by the watch analysis pipeline."""

from __future__ import annotations

from enum import Enum


class AnalysisErrorKind(str, Enum):
    """Closed set of failure categories callers can rely on."""

    EMPTY_INPUT = "empty_input"
    IMAGE_READ_FAILURE = "image_read_failure"
    RESPONSE_PARSE_FAILURE = "response_parse_failure"
    RATE_LIMITED = "rate_limited"
    TIMEOUT = "timeout"
    NETWORK_FAILURE = "network_failure"
    EMPTY_RESULT = "empty_result"
    UNCLASSIFIED = "unclassified"
    CANCELLED = "cancelled"


RETRYABLE_KINDS: frozenset[AnalysisErrorKind] = frozenset(
    {
        AnalysisErrorKind.RESPONSE_PARSE_FAILURE,
        AnalysisErrorKind.RATE_LIMITED,
        AnalysisErrorKind.TIMEOUT,
    }
)

_USER_MESSAGES: dict[AnalysisErrorKind, str] = {
    AnalysisErrorKind.EMPTY_INPUT: "No image was provided. Please take or select a photo.",
    AnalysisErrorKind.IMAGE_READ_FAILURE: "The image could not be read. Please try another photo.",
    AnalysisErrorKind.RESPONSE_PARSE_FAILURE: (
        "The AI service returned an invalid response. Please try again."
    ),
    AnalysisErrorKind.RATE_LIMITED: (
        "Service is temporarily busy. Please try again in a few moments."
    ),
    AnalysisErrorKind.TIMEOUT: (
        "Analysis took too long. Please try again with a clearer image."
    ),
    AnalysisErrorKind.NETWORK_FAILURE: (
        "Network error. Please check your connection and try again."
    ),
    AnalysisErrorKind.EMPTY_RESULT: "The AI service returned an empty result. Please try again.",
    AnalysisErrorKind.CANCELLED: "Analysis was cancelled.",
}


class AnalysisError(RuntimeError):
    """Raised for every failure of an analysis call, tagged with its kind."""

    def __init__(self, kind: AnalysisErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def retryable(self) -> bool:
        return self.kind in RETRYABLE_KINDS

    @property
    def user_message(self) -> str:
        """Presentable text; localization is left to the presentation layer."""
        if self.kind is AnalysisErrorKind.UNCLASSIFIED:
            return f"Analysis failed: {self.message}"
        return _USER_MESSAGES[self.kind]

    def __repr__(self) -> str:
        return f"AnalysisError(kind={self.kind.value!r}, message={self.message!r})"


__all__ = ["AnalysisError", "AnalysisErrorKind", "RETRYABLE_KINDS"]
