"""Editorial alignment labels derived from a source's alignment score.

Scores run from ``-5`` (opposition) to ``+5`` (pro-government). A score is only
labelled when the classification confidence is at least ``0.6``.
"""

from __future__ import annotations

from typing import Final

MIN_ALIGNMENT_SCORE: Final[int] = -5
MAX_ALIGNMENT_SCORE: Final[int] = 5
MIN_LABEL_CONFIDENCE: Final[float] = 0.6
DEFAULT_CONFIDENCE: Final[float] = 0.7

_LABELS_TR: Final[dict[str, str]] = {
    "uncertain": "Belirsiz",
    "opposition": "Muhalefete Yakın",
    "slightly_opposition": "Muhalefete Eğilimli",
    "center": "Karışık / Merkez",
    "slightly_government": "İktidara Eğilimli",
    "government": "İktidara Yakın",
}

_LABELS_EN: Final[dict[str, str]] = {
    "uncertain": "Uncertain",
    "opposition": "Opposition-Leaning",
    "slightly_opposition": "Slightly Opposition",
    "center": "Mixed / Center",
    "slightly_government": "Slightly Pro-Government",
    "government": "Pro-Government",
}


def _bucket(score: int, confidence: float) -> str:
    if confidence < MIN_LABEL_CONFIDENCE:
        return "uncertain"
    if score <= -3:
        return "opposition"
    if score <= -1:
        return "slightly_opposition"
    if score == 0:
        return "center"
    if score <= 2:
        return "slightly_government"
    return "government"


def alignment_label(score: int, confidence: float = DEFAULT_CONFIDENCE) -> str:
    """Return the Turkish alignment label shown to readers."""

    return _LABELS_TR[_bucket(score, confidence)]


def alignment_label_en(score: int, confidence: float = DEFAULT_CONFIDENCE) -> str:
    """Return the English alignment label."""

    return _LABELS_EN[_bucket(score, confidence)]


def alignment_labels(score: int, confidence: float = DEFAULT_CONFIDENCE) -> dict[str, str]:
    return {
        "tr": alignment_label(score, confidence),
        "en": alignment_label_en(score, confidence),
    }


def is_valid_alignment_score(score: object) -> bool:
    """``True`` for integers within ``-5..5`` (booleans excluded)."""

    if isinstance(score, bool) or not isinstance(score, int):
        return False
    return MIN_ALIGNMENT_SCORE <= score <= MAX_ALIGNMENT_SCORE


def is_valid_confidence(confidence: float) -> bool:
    return 0 <= confidence <= 1


__all__ = [
    "DEFAULT_CONFIDENCE",
    "MAX_ALIGNMENT_SCORE",
    "MIN_ALIGNMENT_SCORE",
    "MIN_LABEL_CONFIDENCE",
    "alignment_label",
    "alignment_label_en",
    "alignment_labels",
    "is_valid_alignment_score",
    "is_valid_confidence",
]
