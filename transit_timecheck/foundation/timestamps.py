"""POSIX timestamp helpers shared by every checker.

GTFS-realtime timestamps are unsigned seconds since the epoch.  A common
producer bug is to publish milliseconds instead, which lands the value
centuries in the future.  ``is_posix`` catches that by bounding values to a
plausible deployment window.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

# 2011-01-01T00:00:00Z
MIN_POSIX_TIME = 1_293_840_000
# 2030-01-01T00:00:00Z
MAX_POSIX_TIME = 1_893_456_000

_SECONDS_PER_DAY = 86_400


def is_posix(timestamp: int) -> bool:
    """Return True if *timestamp* falls within the plausible POSIX range."""
    return MIN_POSIX_TIME <= timestamp <= MAX_POSIX_TIME


def to_millis(seconds: int) -> int:
    return seconds * 1000


def get_age(now_millis: int, timestamp: int) -> int:
    """Age of a seconds-based *timestamp* relative to *now_millis*, in milliseconds."""
    return now_millis - to_millis(timestamp)


def format_age(age_millis: int) -> str:
    """Render an age as ``"M min S sec"``."""
    minutes = age_millis // 60_000
    seconds = (age_millis // 1000) % 60
    return f"{minutes} min {seconds} sec"


def posix_to_clock(timestamp: int, zone: str | tzinfo) -> str:
    """Render *timestamp* as a wall-clock ``HH:MM:SS`` string in *zone*.

    Used for human-readable locus text only; comparisons always use the raw
    numeric values.  Values outside datetime's range (usually milliseconds)
    have no local offset and are rendered as ``HH:MM:SS UTC``.
    """
    tz = ZoneInfo(zone) if isinstance(zone, str) else zone
    try:
        return datetime.fromtimestamp(timestamp, tz=tz).strftime("%H:%M:%S")
    except (OverflowError, OSError, ValueError):
        logger.debug("Timestamp %d outside calendar range, rendering in UTC", timestamp)
        hours, rem = divmod(timestamp % _SECONDS_PER_DAY, 3600)
        minutes, seconds = divmod(rem, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d} UTC"
