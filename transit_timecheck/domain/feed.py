"""GTFS-realtime feed snapshot model: the input contract of the engine.

Only the fields the timestamp rules consult are typed.  Every other decoded
field is kept as extra data, so two snapshots compare equal only when the
whole message matches.  Every model is frozen: a snapshot is built once per
poll and never mutated.

Timestamps follow protobuf scalar semantics: ``0`` means "not populated".
Stop-time events and active-period bounds are ``None`` when absent, since
their presence is tracked separately from their value.  Stop-time event
times are signed (``int64`` on the wire).
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from transit_timecheck.domain.enums import EntityKind


# ── Header ───────────────────────────────────────────────────────────────────

class FeedHeader(BaseModel):
    gtfs_realtime_version: str = "2.0"
    timestamp: int = Field(0, ge=0, description="Seconds since epoch, 0 when absent")

    model_config = {"frozen": True, "extra": "allow"}


# ── Trip updates ─────────────────────────────────────────────────────────────

class TripDescriptor(BaseModel):
    trip_id: str = ""
    route_id: str = ""

    model_config = {"frozen": True, "extra": "allow"}


class StopTimeEvent(BaseModel):
    """Predicted arrival or departure at a stop."""

    time: Optional[int] = None
    delay: Optional[int] = None

    model_config = {"frozen": True, "extra": "allow"}


class StopTimeUpdate(BaseModel):
    stop_sequence: Optional[int] = Field(None, ge=0)
    stop_id: str = ""
    arrival: Optional[StopTimeEvent] = None
    departure: Optional[StopTimeEvent] = None

    model_config = {"frozen": True, "extra": "allow"}

    @property
    def arrival_time(self) -> Optional[int]:
        return self.arrival.time if self.arrival is not None else None

    @property
    def departure_time(self) -> Optional[int]:
        return self.departure.time if self.departure is not None else None

    @property
    def locus(self) -> str:
        """Identify the stop, preferring stop_sequence over stop_id."""
        if self.stop_sequence is not None:
            return f"stop_sequence {self.stop_sequence}"
        return f"stop_id {self.stop_id}"


class TripUpdate(BaseModel):
    trip: TripDescriptor = Field(default_factory=TripDescriptor)
    timestamp: int = Field(0, ge=0)
    stop_time_update: list[StopTimeUpdate] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "allow"}


# ── Vehicle positions ────────────────────────────────────────────────────────

class VehicleDescriptor(BaseModel):
    id: str = ""
    label: str = ""

    model_config = {"frozen": True, "extra": "allow"}


class VehiclePosition(BaseModel):
    vehicle: VehicleDescriptor = Field(default_factory=VehicleDescriptor)
    timestamp: int = Field(0, ge=0)

    model_config = {"frozen": True, "extra": "allow"}


# ── Alerts ───────────────────────────────────────────────────────────────────

class TimeRange(BaseModel):
    start: Optional[int] = Field(None, ge=0)
    end: Optional[int] = Field(None, ge=0)

    model_config = {"frozen": True, "extra": "allow"}


class Alert(BaseModel):
    active_period: list[TimeRange] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "allow"}


# ── Entities ─────────────────────────────────────────────────────────────────

class FeedEntity(BaseModel):
    """One feed entity.  GTFS-realtime allows several payloads per entity."""

    id: str = ""
    trip_update: Optional[TripUpdate] = None
    vehicle: Optional[VehiclePosition] = None
    alert: Optional[Alert] = None

    model_config = {"frozen": True, "extra": "allow"}

    @property
    def kinds(self) -> tuple[EntityKind, ...]:
        """Payload kinds present on this entity, in a fixed order."""
        present = {
            EntityKind.TRIP_UPDATE: self.trip_update,
            EntityKind.VEHICLE: self.vehicle,
            EntityKind.ALERT: self.alert,
        }
        return tuple(kind for kind, payload in present.items() if payload is not None)


class FeedSnapshot(BaseModel):
    """One decoded poll of a feed."""

    header: FeedHeader = Field(default_factory=FeedHeader)
    entity: list[FeedEntity] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "allow"}
