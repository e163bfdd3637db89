"""Public schema exports."""

from .analysis import (
    AnalysisSubmission,
    AuthenticityAssessment,
    EstimatedValue,
    WatchAnalysis,
    WatchDetails,
)

__all__ = [
    "AnalysisSubmission",
    "AuthenticityAssessment",
    "EstimatedValue",
    "WatchAnalysis",
    "WatchDetails",
]
