"""transit-timecheck: command-line entry point.

Wires settings, the adapter registry, and the TimestampValidationEngine
together for one-shot validation of snapshot files.  Decoding, rendering,
and logging happen here; the engine only returns data.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from google.protobuf.message import DecodeError

from transit_timecheck.adapters.protobuf import decode_feed_message
from transit_timecheck.adapters.registry import (
    AdaptationError,
    NoAdapterFoundError,
    SnapshotAdapterRegistry,
    default_registry,
)
from transit_timecheck.config import settings
from transit_timecheck.core.timestamp_engine import (
    FeedSnapshotReuseError,
    TimestampValidationEngine,
    ValidationThresholds,
)
from transit_timecheck.domain.diagnostics import DiagnosticGroup
from transit_timecheck.domain.enums import Severity
from transit_timecheck.domain.feed import FeedSnapshot
from transit_timecheck.domain.schedule import ScheduleMetadata
from transit_timecheck.explain.formatter import format_occurrence, format_plain
from transit_timecheck.foundation.clock import now_millis

logger = logging.getLogger("transit_timecheck")

EXIT_OK = 0
EXIT_ERRORS_FOUND = 1
EXIT_USAGE = 2


# ── Loading ──────────────────────────────────────────────────────────────────

def _read_payload(path: Path) -> Any:
    """Read a JSON feed dict or a decoded protobuf FeedMessage from *path*."""
    if path.suffix.lower() == ".json":
        return json.loads(path.read_text(encoding="utf-8"))
    return decode_feed_message(path.read_bytes())


def load_snapshot(path: Path, registry: SnapshotAdapterRegistry) -> FeedSnapshot:
    return registry.adapt(_read_payload(path))


# ── Reporting ────────────────────────────────────────────────────────────────

def log_diagnostics(groups: list[DiagnosticGroup]) -> None:
    for group in groups:
        level = logging.ERROR if group.rule.severity is Severity.ERROR else logging.WARNING
        for occ in group.occurrences:
            logger.log(level, "%s %s", group.rule_id.value, format_occurrence(group.rule, occ))


def has_errors(groups: list[DiagnosticGroup]) -> bool:
    return any(group.rule.severity is Severity.ERROR for group in groups)


# ── CLI ──────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.app_name,
        description="Validate GTFS-realtime feed timestamps",
    )
    parser.add_argument("current", type=Path, help="Current snapshot (.json or .pb)")
    parser.add_argument("--previous", type=Path, default=None, help="Previous snapshot")
    parser.add_argument(
        "--timezone",
        default=settings.default_timezone,
        help="Agency time zone for rendering clock times",
    )
    parser.add_argument(
        "--now-millis",
        type=int,
        default=None,
        help="Override the current time (milliseconds since epoch)",
    )
    parser.add_argument("--log-level", default=settings.log_level)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    engine = TimestampValidationEngine(
        thresholds=ValidationThresholds(
            max_age_seconds=settings.max_age_seconds,
            minimum_refresh_interval_seconds=settings.minimum_refresh_interval_seconds,
        ),
    )
    registry = default_registry()

    try:
        schedule = ScheduleMetadata(timezone=args.timezone)
        current = load_snapshot(args.current, registry)
        previous = load_snapshot(args.previous, registry) if args.previous else None
        groups = engine.validate(
            args.now_millis if args.now_millis is not None else now_millis(),
            schedule,
            current,
            previous,
        )
    except (
        FeedSnapshotReuseError,
        NoAdapterFoundError,
        AdaptationError,
        DecodeError,
        ValueError,
        OSError,
    ) as exc:
        logger.error("Validation not run: %s", exc)
        return EXIT_USAGE

    log_diagnostics(groups)
    print(format_plain(groups))
    return EXIT_ERRORS_FOUND if has_errors(groups) else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
