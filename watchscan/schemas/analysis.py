"""
Pydantic models describing the structured watch analysis result.

Field names are snake_case in Python and camelCase on the wire, matching the
JSON schema declared to the model.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from watchscan.knowledge.currencies import convert_currency


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class EstimatedValue(_WireModel):
    """Estimated market value range."""

    min: float = Field(..., ge=0, description="Minimum market value")
    max: float = Field(..., ge=0, description="Maximum market value")
    currency: str = Field("USD", description="ISO currency code of the range")

    @model_validator(mode="after")
    def _check_range(self) -> "EstimatedValue":
        if self.min > self.max:
            raise ValueError(
                f"estimated value min ({self.min}) exceeds max ({self.max})"
            )
        return self

    def converted(self, currency: str) -> "EstimatedValue":
        """Return the same range expressed in ``currency``."""
        target = currency.upper()
        if target == self.currency.upper():
            return self
        return EstimatedValue(
            min=convert_currency(self.min, self.currency, target),
            max=convert_currency(self.max, self.currency, target),
            currency=target,
        )


class AuthenticityAssessment(_WireModel):
    """Authenticity verdict with supporting evidence."""

    is_authentic: bool = Field(
        ..., description="Whether the watch appears to be authentic or a replica"
    )
    confidence: float = Field(
        ..., ge=0, le=100, description="Confidence level percentage (0-100)"
    )
    reasoning: str = Field(
        ..., description="Detailed explanation of authenticity determination"
    )
    red_flags: list[str] = Field(
        ..., description="List of any suspicious elements or red flags found"
    )
    authenticity_indicators: list[str] = Field(
        ..., description="List of authentic features observed"
    )


class WatchDetails(_WireModel):
    """Physical and provenance details observed in the photo."""

    material: Optional[str] = Field(
        None, description="Case material (e.g., stainless steel, gold, platinum)"
    )
    movement: Optional[str] = Field(None, description="Movement type if identifiable")
    year_of_production: Optional[str] = Field(
        None, description="Estimated year or era of production"
    )
    condition: Optional[str] = Field(None, description="Overall condition assessment")
    notable_features: list[str] = Field(
        ..., description="Notable features or complications"
    )


class WatchAnalysis(_WireModel):
    """Validated analysis result returned to callers."""

    brand: str = Field(
        ..., description="The watch brand (e.g., Rolex, Patek Philippe, Audemars Piguet)"
    )
    model: str = Field(..., description="The specific model name")
    reference_number: Optional[str] = Field(
        None, description="Reference/model number if identifiable"
    )
    estimated_value: EstimatedValue = Field(..., description="Estimated market value range")
    authenticity: AuthenticityAssessment
    details: WatchDetails
    confidence: float = Field(
        ..., ge=0, le=100, description="Overall confidence in the identification"
    )
    notes: Optional[str] = Field(None, description="Additional notes or observations")

    def in_currency(self, currency: str) -> "WatchAnalysis":
        """Copy of this result with the estimated value converted."""
        return self.model_copy(
            update={"estimated_value": self.estimated_value.converted(currency)}
        )


class AnalysisSubmission(_WireModel):
    """HTTP request body for running an analysis."""

    image_uri: str = Field(
        ...,
        description="Local path, file:// URI, http(s) URL or data: URI of the photo.",
    )
    language: Optional[str] = Field(
        None, description="Output language code (en, es, fr, ar, zh)."
    )
    currency: Optional[str] = Field(
        None, description="Optional currency to convert the estimated value into."
    )


__all__ = [
    "AnalysisSubmission",
    "AuthenticityAssessment",
    "EstimatedValue",
    "WatchAnalysis",
    "WatchDetails",
]
