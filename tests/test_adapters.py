"""Tests for snapshot adapters and the adapter registry."""

from __future__ import annotations

import pytest
from google.transit import gtfs_realtime_pb2

from transit_timecheck.adapters.json_payload import JsonPayloadAdapter
from transit_timecheck.adapters.protobuf import ProtobufAdapter, decode_feed_message
from transit_timecheck.adapters.registry import (
    AdaptationError,
    NoAdapterFoundError,
    SnapshotAdapterRegistry,
    default_registry,
)
from transit_timecheck.domain.enums import EntityKind
from transit_timecheck.foundation.timestamps import MIN_POSIX_TIME

M = MIN_POSIX_TIME


def _message() -> gtfs_realtime_pb2.FeedMessage:
    """A decoded FeedMessage with one trip/vehicle entity and one alert."""
    msg = gtfs_realtime_pb2.FeedMessage()
    msg.header.gtfs_realtime_version = "2.0"
    msg.header.timestamp = M

    entity = msg.entity.add()
    entity.id = "1"
    entity.trip_update.trip.trip_id = "1.1"
    entity.trip_update.timestamp = M
    first = entity.trip_update.stop_time_update.add()
    first.stop_sequence = 1
    first.arrival.time = M
    second = entity.trip_update.stop_time_update.add()
    second.stop_id = "B"
    second.departure.delay = 30
    entity.vehicle.vehicle.id = "bus-7"
    entity.vehicle.timestamp = M

    alert = msg.entity.add()
    alert.id = "a1"
    period = alert.alert.active_period.add()
    period.start = M
    return msg


def _json_payload() -> dict:
    return {
        "header": {"gtfs_realtime_version": "2.0", "timestamp": str(M)},
        "entity": [
            {"id": "2", "vehicle": {"vehicle": {"id": "bus-9"}, "timestamp": str(M)}},
        ],
    }


class TestProtobufAdapter:
    def test_can_handle_only_feed_messages(self) -> None:
        adapter = ProtobufAdapter()
        assert adapter.can_handle(_message())
        assert not adapter.can_handle(_json_payload())

    def test_maps_header_and_entities(self) -> None:
        snap = ProtobufAdapter().adapt(_message())
        assert snap.header.timestamp == M
        assert [e.kinds for e in snap.entity] == [
            (EntityKind.TRIP_UPDATE, EntityKind.VEHICLE),
            (EntityKind.ALERT,),
        ]
        assert snap.entity[0].vehicle.vehicle.id == "bus-7"
        assert snap.entity[1].alert.active_period[0].start == M
        assert snap.entity[1].alert.active_period[0].end is None

    def test_preserves_field_presence(self) -> None:
        trip = ProtobufAdapter().adapt(_message()).entity[0].trip_update
        first, second = trip.stop_time_update
        assert first.stop_sequence == 1
        assert first.arrival_time == M
        assert first.departure is None
        assert second.stop_sequence is None
        assert second.locus == "stop_id B"
        assert second.departure is not None
        assert second.departure_time is None

    def test_unset_header_timestamp_is_absent(self) -> None:
        msg = gtfs_realtime_pb2.FeedMessage()
        msg.header.gtfs_realtime_version = "2.0"
        assert ProtobufAdapter().adapt(msg).header.timestamp == 0

    def test_decode_wire_bytes(self) -> None:
        msg = _message()
        assert decode_feed_message(msg.SerializeToString()) == msg


class TestJsonPayloadAdapter:
    def test_can_handle(self) -> None:
        adapter = JsonPayloadAdapter()
        assert adapter.can_handle(_json_payload())
        assert not adapter.can_handle({"entity": []})
        assert not adapter.can_handle("header")

    def test_adapt(self) -> None:
        snap = JsonPayloadAdapter().adapt(_json_payload())
        assert snap.header.timestamp == M
        assert snap.entity[0].vehicle.timestamp == M

    def test_does_not_mutate_payload(self) -> None:
        payload = _json_payload()
        JsonPayloadAdapter().adapt(payload)
        assert payload == _json_payload()


class TestSnapshotAdapterRegistry:
    def test_default_registration_order(self) -> None:
        assert default_registry().adapter_names == ["gtfs_rt_protobuf", "gtfs_rt_json"]

    def test_routes_by_payload_type(self) -> None:
        registry = default_registry()
        assert registry.adapt(_message()).entity[0].id == "1"
        assert registry.adapt(_json_payload()).entity[0].id == "2"

    def test_no_adapter_found(self) -> None:
        with pytest.raises(NoAdapterFoundError):
            default_registry().adapt(["not", "a", "feed"])

    def test_empty_registry(self) -> None:
        with pytest.raises(NoAdapterFoundError):
            SnapshotAdapterRegistry().adapt(_json_payload())

    def test_rejected_payload_wrapped(self) -> None:
        registry = default_registry()
        with pytest.raises(AdaptationError) as exc_info:
            registry.adapt({"header": {"timestamp": -5}})
        assert exc_info.value.adapter_name == "gtfs_rt_json"

    def test_stats(self) -> None:
        registry = default_registry()
        registry.adapt(_json_payload())
        with pytest.raises(AdaptationError):
            registry.adapt({"header": {"timestamp": "soon"}})
        stats = {s["adapter_name"]: s for s in registry.stats}
        assert stats["gtfs_rt_json"]["accepted_count"] == 1
        assert stats["gtfs_rt_json"]["rejected_count"] == 1
        assert stats["gtfs_rt_protobuf"]["accepted_count"] == 0
