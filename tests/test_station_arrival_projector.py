"""Tests for next-train selection and station arrival projection."""

from datetime import UTC, datetime, timedelta

from ptv_transfers.application.services.station_arrival_projector import (
    project_station_arrivals,
    select_next_train,
)
from ptv_transfers.domain.models import NormalizedEvent, StationOffset

T = datetime(2025, 3, 3, 22, 0, tzinfo=UTC)


def _train(minutes: int, direction_id: int | None = 6) -> NormalizedEvent:
    return NormalizedEvent(
        route_id="7", departure_time=T + timedelta(minutes=minutes), direction_id=direction_id
    )


STATIONS = (
    StationOffset("mountWaverley", "Mount Waverley", 0),
    StationOffset("syndal", "Syndal", 3),
    StationOffset("glenWaverley", "Glen Waverley", 6),
)


class TestSelectNextTrain:
    """Tests for choosing the next train."""

    def test_when_several_inbound_trains_then_picks_earliest(self) -> None:
        """Given inbound trains out of order, when selecting, then the earliest is chosen."""
        trains = [_train(12), _train(2), _train(7)]

        assert select_next_train(trains, direction_id=6) == trains[1]

    def test_when_earlier_train_goes_other_way_then_it_is_ignored(self) -> None:
        """Given an earlier outbound train, when selecting, then the inbound one is chosen."""
        trains = [_train(1, direction_id=1), _train(5, direction_id=6)]

        assert select_next_train(trains, direction_id=6) == trains[1]

    def test_when_no_train_in_direction_then_returns_none(self) -> None:
        """Given only trains in the other direction, when selecting, then returns None."""
        assert select_next_train([_train(1, direction_id=1)], direction_id=6) is None

    def test_when_feed_empty_then_returns_none(self) -> None:
        """Given no trains, when selecting, then returns None."""
        assert select_next_train([], direction_id=6) is None

    def test_when_direction_is_none_then_any_train_qualifies(self) -> None:
        """Given no direction filter, when selecting, then the earliest train overall wins."""
        trains = [_train(5, direction_id=6), _train(1, direction_id=1)]

        assert select_next_train(trains, direction_id=None) == trains[1]


class TestProjectStationArrivals:
    """Tests for projecting arrivals downstream."""

    def test_when_offsets_0_3_6_then_arrivals_are_t_t3_t6(self) -> None:
        """Given a train at T and offsets {0, 3, 6}, when projecting, then arrivals are T, T+3, T+6."""
        arrivals = project_station_arrivals(_train(0), STATIONS)

        assert arrivals == {
            "mountWaverley": T,
            "syndal": T + timedelta(minutes=3),
            "glenWaverley": T + timedelta(minutes=6),
        }

    def test_when_stations_unordered_then_result_follows_offset_order(self) -> None:
        """Given stations out of order, when projecting, then arrivals are non-decreasing."""
        shuffled = (STATIONS[2], STATIONS[0], STATIONS[1])

        arrivals = project_station_arrivals(_train(4), shuffled)

        assert list(arrivals) == ["mountWaverley", "syndal", "glenWaverley"]
        times = list(arrivals.values())
        assert times == sorted(times)

    def test_when_projected_twice_then_results_are_equal(self) -> None:
        """Given the same train, when projecting twice, then results are identical."""
        train = _train(3)

        assert project_station_arrivals(train, STATIONS) == project_station_arrivals(
            train, STATIONS
        )
