"""Stop-Sequence Ordering Scanner.

Scans a trip's stop_time_updates left to right, folding a ``ScanState``
accumulator across the sequence.  The state remembers the most recent
*defined* arrival and departure; an update lacking a field leaves the
carried value untouched, so comparisons may reach several stops back.

Every arrival and departure is compared against both carried values.  Each
comparison reports "is less than" or "is equal to" as separate E022
occurrences, so a fully tied pair of stops yields four occurrences:

    arrival   vs previous arrival    (equal)
    arrival   vs previous departure  (equal)
    departure vs previous departure  (equal)
    departure vs previous arrival    (equal)

A departure strictly before the same stop's arrival is reported under E025.
Out-of-range values are reported under E001.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from transit_timecheck.domain.diagnostics import Occurrence
from transit_timecheck.domain.enums import RuleId
from transit_timecheck.domain.feed import StopTimeUpdate, TripUpdate
from transit_timecheck.foundation.timestamps import is_posix

ClockText = Callable[[int], str]


@dataclass(frozen=True)
class ScanState:
    """Most recent defined arrival and departure seen so far in a trip."""

    last_arrival: Optional[int] = None
    last_departure: Optional[int] = None

    def advance(self, update: StopTimeUpdate) -> ScanState:
        """Carry forward each value unless *update* defines a newer one."""
        arrival = update.arrival_time
        departure = update.departure_time
        return ScanState(
            last_arrival=arrival if arrival is not None else self.last_arrival,
            last_departure=departure if departure is not None else self.last_departure,
        )


def scan_stop_time_updates(trip_update: TripUpdate, clock_text: ClockText) -> list[Occurrence]:
    """Check ordering of every stop_time_update in *trip_update*.

    Args:
        trip_update: The trip to scan.
        clock_text: Renders a POSIX time as wall-clock text for locus strings.
    """
    trip_locus = f"trip_id {trip_update.trip.trip_id}"
    state = ScanState()
    found: list[Occurrence] = []
    for update in trip_update.stop_time_update:
        found.extend(check_stop_time_update(trip_locus, update, state, clock_text))
        state = state.advance(update)
    return found


def check_stop_time_update(
    trip_locus: str,
    update: StopTimeUpdate,
    state: ScanState,
    clock_text: ClockText,
) -> list[Occurrence]:
    """Check one stop_time_update against the carried *state*."""
    locus = f"{trip_locus} {update.locus}"
    arrival = update.arrival_time
    departure = update.departure_time
    found: list[Occurrence] = []

    if arrival is not None:
        if not is_posix(arrival):
            found.append(Occurrence(rule_id=RuleId.E001, prefix=f"{locus} arrival_time {arrival}"))
        for previous_field, previous in (
            ("arrival_time", state.last_arrival),
            ("departure_time", state.last_departure),
        ):
            occ = _compare_to_previous(
                locus, "arrival_time", arrival, previous_field, previous, clock_text
            )
            if occ is not None:
                found.append(occ)

    if departure is not None:
        if not is_posix(departure):
            found.append(Occurrence(rule_id=RuleId.E001, prefix=f"{locus} departure_time {departure}"))
        for previous_field, previous in (
            ("departure_time", state.last_departure),
            ("arrival_time", state.last_arrival),
        ):
            occ = _compare_to_previous(
                locus, "departure_time", departure, previous_field, previous, clock_text
            )
            if occ is not None:
                found.append(occ)
        if arrival is not None and departure < arrival:
            found.append(Occurrence(
                rule_id=RuleId.E025,
                prefix=(
                    f"{locus} departure_time {clock_text(departure)} ({departure}) "
                    f"is less than the same stop arrival_time {clock_text(arrival)} ({arrival})"
                ),
            ))

    return found


def _compare_to_previous(
    locus: str,
    field: str,
    value: int,
    previous_field: str,
    previous: Optional[int],
    clock_text: ClockText,
) -> Optional[Occurrence]:
    if previous is None:
        return None
    if value < previous:
        relation = "is less than"
    elif value == previous:
        relation = "is equal to"
    else:
        return None
    return Occurrence(
        rule_id=RuleId.E022,
        prefix=(
            f"{locus} {field} {clock_text(value)} ({value}) {relation} "
            f"previous stop {previous_field} {clock_text(previous)} ({previous})"
        ),
    )
