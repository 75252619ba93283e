"""Header Checker: feed-wide timestamp and cross-snapshot sequencing.

Rules:
    W001  header timestamp not populated
    E001  header timestamp not in POSIX time
    W008  header timestamp older than the maximum allowed age
    E017  header timestamp unchanged since the previous snapshot
    E018  header timestamp decreased since the previous snapshot
    W007  interval since the previous snapshot exceeds the refresh interval

E017, E018 and W007 are mutually exclusive and evaluated in that order.
"""

from __future__ import annotations

from typing import Optional

from transit_timecheck.domain.diagnostics import Occurrence
from transit_timecheck.domain.enums import RuleId
from transit_timecheck.foundation.timestamps import (
    format_age,
    get_age,
    is_posix,
    to_millis,
)


def check_header(
    header_timestamp: int,
    previous_header_timestamp: Optional[int],
    now_millis: int,
    *,
    max_age_seconds: int,
    minimum_refresh_interval_seconds: int,
) -> list[Occurrence]:
    """Validate the header timestamp of the current snapshot.

    Args:
        header_timestamp: Current header timestamp (0 when absent).
        previous_header_timestamp: Header timestamp of the previous snapshot,
            or None when there is no previous snapshot.  0 is treated the same
            as None.
        now_millis: Current wall-clock time in milliseconds.
    """
    if header_timestamp == 0:
        return [Occurrence(rule_id=RuleId.W001, prefix="header")]

    found: list[Occurrence] = []

    if not is_posix(header_timestamp):
        found.append(Occurrence(rule_id=RuleId.E001, prefix="header.timestamp"))
    else:
        age = get_age(now_millis, header_timestamp)
        if age > to_millis(max_age_seconds):
            found.append(Occurrence(
                rule_id=RuleId.W008,
                prefix=f"header.timestamp is {format_age(age)}",
            ))

    if previous_header_timestamp:
        found.extend(_check_sequencing(
            header_timestamp,
            previous_header_timestamp,
            minimum_refresh_interval_seconds,
        ))

    return found


def _check_sequencing(current: int, previous: int, refresh_interval: int) -> list[Occurrence]:
    interval = current - previous
    if current == previous:
        return [Occurrence(rule_id=RuleId.E017, prefix=f"header.timestamp of {current}")]
    if current < previous:
        return [Occurrence(
            rule_id=RuleId.E018,
            prefix=f"header.timestamp of {current} is less than the header.timestamp of {previous}",
        )]
    if interval > refresh_interval:
        return [Occurrence(
            rule_id=RuleId.W007,
            prefix=f"{interval} second interval between consecutive header.timestamps",
        )]
    return []
