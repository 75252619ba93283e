"""Adapter Registry: selects the snapshot adapter for a decoded payload.

Adapters are tried in registration order; the first whose can_handle()
returns True translates the payload.  Fail fast if nothing matches.
"""

from __future__ import annotations

import logging
from typing import Any

from transit_timecheck.adapters.base import SnapshotAdapter
from transit_timecheck.adapters.json_payload import JsonPayloadAdapter
from transit_timecheck.adapters.protobuf import ProtobufAdapter
from transit_timecheck.domain.feed import FeedSnapshot

logger = logging.getLogger(__name__)


class AdapterStats:
    """Per-adapter conversion statistics."""

    __slots__ = ("adapter_name", "accepted_count", "rejected_count")

    def __init__(self, adapter_name: str) -> None:
        self.adapter_name = adapter_name
        self.accepted_count: int = 0
        self.rejected_count: int = 0

    def to_dict(self) -> dict:
        return {
            "adapter_name": self.adapter_name,
            "accepted_count": self.accepted_count,
            "rejected_count": self.rejected_count,
        }


class NoAdapterFoundError(Exception):
    """Raised when no registered adapter can handle a payload."""


class AdaptationError(Exception):
    """Raised when a matched adapter fails to translate the payload."""

    def __init__(self, adapter_name: str, reason: str) -> None:
        self.adapter_name = adapter_name
        self.reason = reason
        super().__init__(f"Adapter '{adapter_name}' failed: {reason}")


class SnapshotAdapterRegistry:
    """Registry of snapshot adapters with selection and stats tracking.

    Usage:
        registry = SnapshotAdapterRegistry()
        registry.register(ProtobufAdapter())
        registry.register(JsonPayloadAdapter())

        snapshot = registry.adapt(message)
    """

    def __init__(self) -> None:
        self._adapters: list[SnapshotAdapter] = []
        self._stats: dict[str, AdapterStats] = {}

    def register(self, adapter: SnapshotAdapter) -> None:
        self._adapters.append(adapter)
        self._stats[adapter.source_name] = AdapterStats(adapter.source_name)
        logger.debug("Registered adapter: %s", adapter.source_name)

    def adapt(self, raw: Any) -> FeedSnapshot:
        """Route a decoded payload through the first matching adapter.

        Raises:
            NoAdapterFoundError: If no adapter's can_handle() returns True.
            AdaptationError: If the matched adapter fails to translate.
        """
        for adapter in self._adapters:
            if adapter.can_handle(raw):
                stats = self._stats[adapter.source_name]
                try:
                    snapshot = adapter.adapt(raw)
                except ValueError as exc:
                    stats.rejected_count += 1
                    logger.warning(
                        "Adapter '%s' rejected payload: %s",
                        adapter.source_name,
                        exc,
                    )
                    raise AdaptationError(adapter.source_name, str(exc)) from exc
                stats.accepted_count += 1
                logger.debug(
                    "Adapter '%s' accepted payload with %d entities",
                    adapter.source_name,
                    len(snapshot.entity),
                )
                return snapshot

        raise NoAdapterFoundError(
            f"No adapter can handle payload of type {type(raw).__name__}"
        )

    @property
    def adapter_names(self) -> list[str]:
        return [a.source_name for a in self._adapters]

    @property
    def stats(self) -> list[dict]:
        return [s.to_dict() for s in self._stats.values()]


def default_registry() -> SnapshotAdapterRegistry:
    """Registry with the protobuf and JSON adapters, in that order."""
    registry = SnapshotAdapterRegistry()
    registry.register(ProtobufAdapter())
    registry.register(JsonPayloadAdapter())
    return registry
