"""Entity Hierarchy Checker: per-entity timestamps against the header.

Applies to trip updates and vehicle positions of the current snapshot.  A
populated timestamp is checked twice, independently: against the header
bound (E012) and for POSIX validity (E001).  Both may fire for one entity.
"""

from __future__ import annotations

from transit_timecheck.domain.diagnostics import Occurrence
from transit_timecheck.domain.enums import RuleId
from transit_timecheck.domain.feed import TripUpdate, VehiclePosition
from transit_timecheck.foundation.timestamps import is_posix


def check_trip_update_timestamp(trip_update: TripUpdate, header_timestamp: int) -> list[Occurrence]:
    return _check_entity_timestamp(
        f"trip_id {trip_update.trip.trip_id}",
        trip_update.timestamp,
        header_timestamp,
    )


def check_vehicle_timestamp(vehicle: VehiclePosition, header_timestamp: int) -> list[Occurrence]:
    return _check_entity_timestamp(
        f"vehicle_id {vehicle.vehicle.id}",
        vehicle.timestamp,
        header_timestamp,
    )


def _check_entity_timestamp(locus: str, timestamp: int, header_timestamp: int) -> list[Occurrence]:
    if timestamp == 0:
        return [Occurrence(rule_id=RuleId.W001, prefix=locus)]

    found: list[Occurrence] = []
    if header_timestamp != 0 and timestamp > header_timestamp:
        found.append(Occurrence(rule_id=RuleId.E012, prefix=f"{locus} timestamp {timestamp}"))
    if not is_posix(timestamp):
        found.append(Occurrence(rule_id=RuleId.E001, prefix=f"{locus} timestamp {timestamp}"))
    return found
