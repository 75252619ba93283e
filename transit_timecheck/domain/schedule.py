"""Static schedule metadata consumed by the engine.

Only the agency time zone is needed, and only to render wall-clock times in
locus text.  Loading the static GTFS dataset is an external concern.
"""

from __future__ import annotations

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator


class ScheduleMetadata(BaseModel):
    timezone: str = Field("UTC", description="IANA time zone of the agency")

    model_config = {"frozen": True}

    @field_validator("timezone")
    @classmethod
    def timezone_must_exist(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown time zone: {v}") from exc
        return v

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)
