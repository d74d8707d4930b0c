"""Domain entity describing a change in a source's editorial alignment."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AlignmentChange:
    """Alignment score transition reported by the scoring process.

    Labels are snapshots computed by the caller; they are stored as given.
    """

    source_id: int
    source_name: str
    old_score: int | None
    new_score: int
    old_label: str | None
    new_label: str | None
    reason: str


__all__ = ["AlignmentChange"]
