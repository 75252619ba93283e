"""Wall-clock source.

The single source of "now" so tests can monkey-patch it trivially.  The
validation engine never calls it: callers pass the current time in.
"""

from __future__ import annotations

import time


def now_millis() -> int:
    """Return the current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000
