"""Pydantic models describing alignment notification queue payloads."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from alignment_alerts.utils.alignment import (
    DEFAULT_CONFIDENCE,
    is_valid_alignment_score,
    is_valid_confidence,
)


class AlignmentChangeCreate(BaseModel):
    """Alignment score change reported for a source."""

    source_id: int = Field(..., gt=0, description="Identifier of the news source")
    source_name: str = Field(..., min_length=1, max_length=255)
    old_score: int | None = None
    new_score: int
    old_label: str | None = Field(default=None, max_length=64)
    new_label: str | None = Field(
        default=None,
        max_length=64,
        description="Derived from ``new_score`` and ``confidence`` when omitted",
    )
    confidence: float = DEFAULT_CONFIDENCE
    reason: str = Field(default="Admin update", min_length=1)

    @field_validator("old_score", "new_score")
    @classmethod
    def _check_score(cls, value: int | None) -> int | None:
        if value is not None and not is_valid_alignment_score(value):
            raise ValueError("Alignment score must be an integer between -5 and 5")
        return value

    @field_validator("confidence")
    @classmethod
    def _check_confidence(cls, value: float) -> float:
        if not is_valid_confidence(value):
            raise ValueError("Confidence must be between 0 and 1")
        return value


class AlignmentLabelsRead(BaseModel):
    tr: str
    en: str


class AlignmentChangeQueued(BaseModel):
    queued: int
    labels: AlignmentLabelsRead


class QueueStatusRead(BaseModel):
    pending: int
    failed: int


class DispatchResultRead(BaseModel):
    sent: int
    failed: int


class RetryResultRead(BaseModel):
    retried: int


__all__ = [
    "AlignmentChangeCreate",
    "AlignmentChangeQueued",
    "AlignmentLabelsRead",
    "DispatchResultRead",
    "QueueStatusRead",
    "RetryResultRead",
]
