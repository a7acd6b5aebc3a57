"""Suitability result models."""

from __future__ import annotations

from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

MAX_REASONS = 3

# Upper bounds (inclusive) for the label buckets
TERRIBLE_MAX_SCORE = 30
OK_MAX_SCORE = 70


class SuitabilityLabel(str, Enum):
    """Coarse bucket derived from the numeric score."""

    TERRIBLE = "TERRIBLE"
    OK = "OK"
    GREAT = "GREAT"


def label_for_score(score: int) -> SuitabilityLabel:
    """Derive the label for a 0-100 score."""
    if score <= TERRIBLE_MAX_SCORE:
        return SuitabilityLabel.TERRIBLE
    if score <= OK_MAX_SCORE:
        return SuitabilityLabel.OK
    return SuitabilityLabel.GREAT


def dedupe_reasons(reasons: list[str], limit: int = MAX_REASONS) -> list[str]:
    """Drop repeated reasons, keeping first-occurrence order, and cap the list."""
    seen: set[str] = set()
    unique: list[str] = []
    for reason in reasons:
        if reason in seen:
            continue
        seen.add(reason)
        unique.append(reason)
    return unique[:limit]


class SuitabilityResult(BaseModel):
    """How suitable a place is for an activity right now."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100, description="Suitability score (0-100)")
    label: SuitabilityLabel = Field(..., description="Bucket derived from the score")
    reasons: list[str] = Field(
        default_factory=list,
        max_length=MAX_REASONS,
        description="Short explanations, most relevant first",
    )

    @model_validator(mode="after")
    def validate_label_and_reasons(self) -> Self:
        """Ensure the label matches the score and reasons are distinct."""
        if self.label != label_for_score(self.score):
            raise ValueError(
                f"Label {self.label.value} does not match score {self.score}"
            )
        if len(set(self.reasons)) != len(self.reasons):
            raise ValueError("Reasons must be distinct")
        return self

    @classmethod
    def from_score(cls, score: int, reasons: list[str]) -> Self:
        """Build a result, deriving the label and tidying the reasons."""
        return cls(
            score=score,
            label=label_for_score(score),
            reasons=dedupe_reasons(reasons),
        )
