"""TimestampValidationEngine: temporal consistency of a GTFS-realtime feed.

Design principles:
    1. Pure function: accepts snapshots, returns diagnostic groups.
    2. No side effects, no state mutation, no I/O.
    3. Thresholds are explicit and passed in at construction.
    4. Diagnostics are data.  The only exception raised is for caller
       misuse (the same snapshot passed as current and previous).

Pipeline for one call:
    header checker         -> once per call
    hierarchy checker      -> each trip update and vehicle position
    stop-sequence scanner  -> each trip update
    alert window checker   -> each alert
    assembler              -> groups in catalog order, empty rules omitted
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from transit_timecheck.core.alerts import check_alert
from transit_timecheck.core.collector import OccurrenceCollector
from transit_timecheck.core.header import check_header
from transit_timecheck.core.hierarchy import (
    check_trip_update_timestamp,
    check_vehicle_timestamp,
)
from transit_timecheck.core.stop_sequence import ClockText, scan_stop_time_updates
from transit_timecheck.domain.diagnostics import DiagnosticGroup, Occurrence
from transit_timecheck.domain.enums import EntityKind
from transit_timecheck.domain.feed import FeedEntity, FeedSnapshot
from transit_timecheck.domain.schedule import ScheduleMetadata
from transit_timecheck.foundation.timestamps import posix_to_clock
from transit_timecheck.rules.catalog import RuleCatalog

logger = logging.getLogger(__name__)

ClockFormatter = Callable[[int, tzinfo], str]


class FeedSnapshotReuseError(ValueError):
    """Raised when the current and previous snapshots are identical.

    Sequencing checks are meaningless against the same content, so this
    almost always means the caller passed the wrong snapshot.
    """


@dataclass(frozen=True)
class ValidationThresholds:
    """Configurable thresholds, set once at startup."""

    # Maximum allowed age of the header timestamp (W008)
    max_age_seconds: int = 65
    # Intervals above this between consecutive headers are reported (W007)
    minimum_refresh_interval_seconds: int = 35


class TimestampValidationEngine:
    """Validates timestamps of a feed snapshot, optionally against its predecessor.

    This engine is stateless: every call allocates its own collector and
    scan state, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        thresholds: ValidationThresholds | None = None,
        catalog: RuleCatalog | None = None,
        clock_formatter: ClockFormatter = posix_to_clock,
    ) -> None:
        self._thresholds = thresholds or ValidationThresholds()
        self._catalog = catalog or RuleCatalog()
        self._clock_formatter = clock_formatter

    @property
    def thresholds(self) -> ValidationThresholds:
        return self._thresholds

    # ── Public API ───────────────────────────────────────────────────────

    def validate(
        self,
        now_millis: int,
        schedule: ScheduleMetadata,
        current: FeedSnapshot,
        previous: Optional[FeedSnapshot] = None,
    ) -> list[DiagnosticGroup]:
        """Run every timestamp rule against *current*.

        Args:
            now_millis: Current wall-clock time in milliseconds since epoch.
            schedule: Static schedule metadata, used for its time zone.
            current: The snapshot under validation.
            previous: The snapshot polled immediately before, if any.

        Returns:
            Diagnostic groups in catalog order.  Rules without occurrences
            are omitted; an empty list means the feed passed.

        Raises:
            FeedSnapshotReuseError: If *previous* equals *current*.
        """
        if previous is not None and previous == current:
            raise FeedSnapshotReuseError("current and previous snapshots must not be the same")

        collector = OccurrenceCollector()
        header_timestamp = current.header.timestamp
        zone = schedule.zone

        def clock_text(timestamp: int) -> str:
            return self._clock_formatter(timestamp, zone)

        collector.extend(check_header(
            header_timestamp,
            previous.header.timestamp if previous is not None else None,
            now_millis,
            max_age_seconds=self._thresholds.max_age_seconds,
            minimum_refresh_interval_seconds=self._thresholds.minimum_refresh_interval_seconds,
        ))

        for entity in current.entity:
            for kind in entity.kinds:
                collector.extend(self._check_entity(kind, entity, header_timestamp, clock_text))

        groups = collector.assemble(self._catalog)
        logger.debug(
            "Timestamp validation: %d entities, %d occurrences in %d groups",
            len(current.entity),
            collector.total,
            len(groups),
        )
        return groups

    # ── Per-kind dispatch ────────────────────────────────────────────────

    def _check_entity(
        self,
        kind: EntityKind,
        entity: FeedEntity,
        header_timestamp: int,
        clock_text: ClockText,
    ) -> list[Occurrence]:
        return _ENTITY_CHECKERS[kind](entity, header_timestamp, clock_text)


def _check_trip_update(entity: FeedEntity, header_timestamp: int, clock_text: ClockText) -> list[Occurrence]:
    return (
        check_trip_update_timestamp(entity.trip_update, header_timestamp)
        + scan_stop_time_updates(entity.trip_update, clock_text)
    )


def _check_vehicle(entity: FeedEntity, header_timestamp: int, clock_text: ClockText) -> list[Occurrence]:
    return check_vehicle_timestamp(entity.vehicle, header_timestamp)


def _check_alert(entity: FeedEntity, header_timestamp: int, clock_text: ClockText) -> list[Occurrence]:
    return check_alert(entity.id, entity.alert)


EntityChecker = Callable[[FeedEntity, int, ClockText], list[Occurrence]]

_ENTITY_CHECKERS: dict[EntityKind, EntityChecker] = {
    EntityKind.TRIP_UPDATE: _check_trip_update,
    EntityKind.VEHICLE: _check_vehicle,
    EntityKind.ALERT: _check_alert,
}
