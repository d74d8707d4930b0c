"""Operate the alignment notification queue from the command line."""

from __future__ import annotations

import argparse
import logging

from alignment_alerts.application.use_cases.alignment_notifications import (
    build_notification_context,
    get_pending_notification_count,
)
from alignment_alerts.config import get_settings
from alignment_alerts.infrastructure.database import SessionLocal, initialize_database
from alignment_alerts.interfaces.jobs import run_dispatch_job, run_retry_job


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for queue operations."""

    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Inspect, dispatch and retry queued alignment-change notifications.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level instead of INFO.",
    )
    subcommands = parser.add_subparsers(dest="command", required=True)

    subcommands.add_parser("init-db", help="Create the queue tables if they are missing.")
    subcommands.add_parser("status", help="Print the pending and failed counts.")

    process = subcommands.add_parser("process", help="Deliver one batch of pending notifications.")
    process.add_argument(
        "--batch-size",
        type=int,
        default=settings.dispatch_batch_size,
        help=f"Rows processed in this run (default: {settings.dispatch_batch_size})",
    )

    retry = subcommands.add_parser("retry", help="Re-queue failed notifications.")
    retry.add_argument(
        "--limit",
        type=int,
        default=settings.retry_limit,
        help=f"Maximum failed rows to re-queue (default: {settings.retry_limit})",
    )
    return parser.parse_args(argv)


def _print_status() -> None:
    session = SessionLocal()
    try:
        counts = get_pending_notification_count(build_notification_context(session))
    finally:
        session.close()
    print(f"pending: {counts.pending}\nfailed: {counts.failed}")


def main(argv: list[str] | None = None) -> None:
    """Run the requested queue operation."""

    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "init-db":
        initialize_database()
        print("Tables ready.")
        return

    if args.command == "status":
        _print_status()
        return

    if args.command == "process":
        if args.batch_size <= 0:
            raise SystemExit("--batch-size must be a positive integer")
        result = run_dispatch_job(batch_size=args.batch_size)
        if result is None:
            raise SystemExit("Dispatching failed; see the log for details.")
        print(f"sent: {result.sent}\nfailed: {result.failed}")
        return

    if args.limit <= 0:
        raise SystemExit("--limit must be a positive integer")
    print(f"retried: {run_retry_job(limit=args.limit)}")


if __name__ == "__main__":
    main()
