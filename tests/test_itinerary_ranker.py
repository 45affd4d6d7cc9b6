"""Tests for itinerary ranking."""

import random
from datetime import UTC, datetime, timedelta

from ptv_transfers.application.services.itinerary_ranker import rank_itineraries
from ptv_transfers.domain.models import Itinerary

NOW = datetime(2025, 3, 3, 22, 0, tzinfo=UTC)


def _itinerary(arrival_minutes: int, station: str = "Syndal", route: str = "703") -> Itinerary:
    arrival = NOW + timedelta(minutes=arrival_minutes)
    return Itinerary(
        station_name=station,
        train_arrival=NOW,
        bus_departure=arrival - timedelta(minutes=10),
        route_number=route,
        bus_travel_minutes=10,
        destination_arrival=arrival,
        total_minutes=arrival_minutes,
    )


def test_when_unsorted_then_ranks_by_destination_arrival() -> None:
    """Given itineraries out of order, when ranking, then earliest arrival comes first."""
    itineraries = [_itinerary(30), _itinerary(20), _itinerary(25)]

    best, ranked = rank_itineraries(itineraries)

    assert [i.total_minutes for i in ranked] == [20, 25, 30]
    assert best == itineraries[1]


def test_when_arrivals_tie_then_construction_order_is_kept() -> None:
    """Given simultaneous arrivals, when ranking, then their original order is preserved."""
    mount_waverley = _itinerary(27, "Mount Waverley", "733")
    glen_waverley = _itinerary(27, "Glen Waverley", "737")

    best, ranked = rank_itineraries([mount_waverley, glen_waverley])

    assert best is mount_waverley
    assert ranked == [mount_waverley, glen_waverley]


def test_when_empty_then_no_recommendation() -> None:
    """Given no itineraries, when ranking, then recommendation is None and the list is empty."""
    best, ranked = rank_itineraries([])

    assert best is None
    assert ranked == []


def test_ranked_output_is_sorted_and_head_is_minimum() -> None:
    """Given random itineraries, when ranking, then output is sorted and the head is the minimum."""
    rng = random.Random(42)
    for _ in range(200):
        itineraries = [_itinerary(rng.randint(0, 90)) for _ in range(rng.randint(1, 8))]

        best, ranked = rank_itineraries(itineraries)

        arrivals = [i.destination_arrival for i in ranked]
        assert arrivals == sorted(arrivals)
        assert best is not None
        assert best.destination_arrival == min(i.destination_arrival for i in itineraries)
        assert len(ranked) == len(itineraries)


def test_input_is_not_mutated() -> None:
    """Given a list of itineraries, when ranking, then the input list is left untouched."""
    itineraries = [_itinerary(30), _itinerary(20)]

    rank_itineraries(itineraries)

    assert [i.total_minutes for i in itineraries] == [30, 20]
