"""Alert Window Checker: POSIX validity of alert active periods.

Start and end are validated independently.  Their relative order is not
checked.
"""

from __future__ import annotations

from transit_timecheck.domain.diagnostics import Occurrence
from transit_timecheck.domain.enums import RuleId
from transit_timecheck.domain.feed import Alert
from transit_timecheck.foundation.timestamps import is_posix


def check_alert(entity_id: str, alert: Alert) -> list[Occurrence]:
    found: list[Occurrence] = []
    for period in alert.active_period:
        for bound, value in (("start", period.start), ("end", period.end)):
            if value is not None and not is_posix(value):
                found.append(Occurrence(
                    rule_id=RuleId.E001,
                    prefix=f"alert in entity {entity_id} active_period.{bound} {value}",
                ))
    return found
