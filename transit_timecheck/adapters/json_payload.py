"""Adapter for GTFS-realtime JSON payloads.

Accepts dicts shaped like the protobuf JSON mapping with original field
names (``trip_update``, ``stop_time_update``, ...).  Numeric fields rendered
as strings (uint64 in proto3 JSON) are coerced by the model.
"""

from __future__ import annotations

from typing import Any

from transit_timecheck.adapters.base import SnapshotAdapter
from transit_timecheck.domain.feed import FeedSnapshot


class JsonPayloadAdapter(SnapshotAdapter):
    """Maps a decoded JSON feed dict onto FeedSnapshot."""

    @property
    def source_name(self) -> str:
        return "gtfs_rt_json"

    def can_handle(self, raw: Any) -> bool:
        return isinstance(raw, dict) and "header" in raw

    def adapt(self, raw: Any) -> FeedSnapshot:
        return FeedSnapshot.model_validate(raw)
