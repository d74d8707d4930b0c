"""Pydantic schemas exposed by the HTTP interface."""

from .alignment_notification import (
    AlignmentChangeCreate,
    AlignmentChangeQueued,
    AlignmentLabelsRead,
    DispatchResultRead,
    QueueStatusRead,
    RetryResultRead,
)

__all__ = [
    "AlignmentChangeCreate",
    "AlignmentChangeQueued",
    "AlignmentLabelsRead",
    "DispatchResultRead",
    "QueueStatusRead",
    "RetryResultRead",
]
