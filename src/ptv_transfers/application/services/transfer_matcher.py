"""Selection of the first bus that can be caught after a train arrives."""

from collections.abc import Iterable
from datetime import datetime, timedelta

from ptv_transfers.domain.models.normalized_event import NormalizedEvent


def events_for_route(
    events: Iterable[NormalizedEvent], route_number: str
) -> list[NormalizedEvent]:
    """Keep only the events running on the given route number."""
    return [e for e in events if e.route_number == route_number]


def find_connection(
    arrival_time: datetime,
    min_transfer_minutes: int,
    events: Iterable[NormalizedEvent],
) -> NormalizedEvent | None:
    """Return the earliest event departing at least the transfer buffer after arrival.

    Events departing at the same instant keep their input order, so the first
    one seen wins. Returns None when nothing is catchable.
    """
    earliest_catchable = arrival_time + timedelta(minutes=min_transfer_minutes)
    best: NormalizedEvent | None = None
    for event in events:
        if event.departure_time < earliest_catchable:
            continue
        if best is None or event.departure_time < best.departure_time:
            best = event
    return best
