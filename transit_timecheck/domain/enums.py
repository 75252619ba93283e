"""Controlled enumerations for the transit-timecheck domain.

Every categorical field in the domain MUST reference an enum defined here.
Free-form strings are not acceptable for classification fields.
"""

from __future__ import annotations

from enum import Enum


class RuleId(str, Enum):
    """Timestamp rules, declared in catalog order.

    Diagnostics are always reported in this order.
    """

    W001 = "W001"  # timestamp not populated
    W007 = "W007"  # refresh interval exceeded
    W008 = "W008"  # header timestamp is stale
    E001 = "E001"  # not in POSIX time
    E012 = "E012"  # entity timestamp exceeds header timestamp
    E017 = "E017"  # content changed but header timestamp did not
    E018 = "E018"  # header timestamp decreased
    E022 = "E022"  # stop_time_update times not increasing
    E025 = "E025"  # departure before arrival at the same stop


class Severity(str, Enum):
    WARNING = "WARNING"
    ERROR = "ERROR"


class EntityKind(str, Enum):
    """The payload kinds a feed entity can carry."""

    TRIP_UPDATE = "trip_update"
    VEHICLE = "vehicle"
    ALERT = "alert"
