from transit_timecheck.core.timestamp_engine import (
    FeedSnapshotReuseError,
    TimestampValidationEngine,
    ValidationThresholds,
)
from transit_timecheck.domain.diagnostics import DiagnosticGroup, Occurrence, Rule
from transit_timecheck.domain.feed import FeedSnapshot
from transit_timecheck.domain.schedule import ScheduleMetadata
from transit_timecheck.rules.catalog import RuleCatalog

__all__ = [
    "DiagnosticGroup",
    "FeedSnapshot",
    "FeedSnapshotReuseError",
    "Occurrence",
    "Rule",
    "RuleCatalog",
    "ScheduleMetadata",
    "TimestampValidationEngine",
    "ValidationThresholds",
]
