"""Background jobs run by the in-process scheduler."""

from .alignment_notifications import (
    run_dispatch_job,
    run_retry_job,
    start_alignment_notification_scheduler,
    trigger_notification_processing,
)

__all__ = [
    "run_dispatch_job",
    "run_retry_job",
    "start_alignment_notification_scheduler",
    "trigger_notification_processing",
]
