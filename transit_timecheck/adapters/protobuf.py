"""Adapter for decoded ``gtfs_realtime_pb2.FeedMessage`` objects.

Decoding the wire bytes is done by the gtfs-realtime-bindings package; this
adapter only maps the resulting message onto FeedSnapshot.  Field presence
is preserved by MessageToDict: unset optional fields are omitted, so an
absent arrival time stays ``None`` rather than becoming ``0``.
"""

from __future__ import annotations

from typing import Any

from google.protobuf.json_format import MessageToDict
from google.transit import gtfs_realtime_pb2

from transit_timecheck.adapters.base import SnapshotAdapter
from transit_timecheck.domain.feed import FeedSnapshot


class ProtobufAdapter(SnapshotAdapter):
    """Maps a GTFS-realtime FeedMessage onto FeedSnapshot."""

    @property
    def source_name(self) -> str:
        return "gtfs_rt_protobuf"

    def can_handle(self, raw: Any) -> bool:
        return isinstance(raw, gtfs_realtime_pb2.FeedMessage)

    def adapt(self, raw: Any) -> FeedSnapshot:
        payload = MessageToDict(raw, preserving_proto_field_name=True)
        return FeedSnapshot.model_validate(payload)


def decode_feed_message(data: bytes) -> gtfs_realtime_pb2.FeedMessage:
    """Parse protobuf wire bytes with the GTFS-realtime bindings."""
    message = gtfs_realtime_pb2.FeedMessage()
    message.ParseFromString(data)
    return message
