"""Utility helpers for reusable functionality."""

from .alignment import (
    alignment_label,
    alignment_label_en,
    alignment_labels,
    is_valid_alignment_score,
    is_valid_confidence,
)
from .datetime import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
)

__all__ = [
    "alignment_label",
    "alignment_label_en",
    "alignment_labels",
    "is_valid_alignment_score",
    "is_valid_confidence",
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
]
