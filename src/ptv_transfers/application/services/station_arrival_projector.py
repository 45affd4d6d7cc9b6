"""Projection of a train's arrival at downstream stations."""

from collections.abc import Iterable
from datetime import datetime, timedelta

from ptv_transfers.domain.models.normalized_event import NormalizedEvent
from ptv_transfers.domain.models.station_offset import StationOffset


def select_next_train(
    events: Iterable[NormalizedEvent], direction_id: int | None
) -> NormalizedEvent | None:
    """Pick the earliest train heading in the given direction.

    A direction of None accepts every train.
    """
    next_train: NormalizedEvent | None = None
    for event in events:
        if direction_id is not None and event.direction_id != direction_id:
            continue
        if next_train is None or event.departure_time < next_train.departure_time:
            next_train = event
    return next_train


def project_station_arrivals(
    train: NormalizedEvent, stations: Iterable[StationOffset]
) -> dict[str, datetime]:
    """Map each station id to the train's projected arrival there.

    Stations are returned in ascending offset order.
    """
    ordered = sorted(stations, key=lambda s: s.offset_minutes)
    return {
        station.station_id: train.departure_time + timedelta(minutes=station.offset_minutes)
        for station in ordered
    }
