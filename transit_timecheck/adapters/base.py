"""Abstract base for snapshot adapters.

Snapshot adapters turn already-decoded feed payloads into the canonical
FeedSnapshot model.

Architectural rules:
    1. Adapters must NOT mutate the incoming payload.
    2. adapt() must return a fully valid FeedSnapshot or raise ValueError.
    3. Adapters never fetch or decode wire bytes; they only map fields.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from transit_timecheck.domain.feed import FeedSnapshot


class SnapshotAdapter(ABC):
    """Base class for converting decoded feed payloads into FeedSnapshots."""

    @abstractmethod
    def can_handle(self, raw: Any) -> bool:
        """Return True if this adapter knows how to translate *raw*.

        Must be a fast, non-destructive check (e.g. type or key presence).
        """
        ...

    @abstractmethod
    def adapt(self, raw: Any) -> FeedSnapshot:
        """Translate *raw* into a validated FeedSnapshot.

        Raises:
            ValueError: If the payload cannot be normalised.
        """
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Human-readable name of the payload format this adapter handles."""
        ...
