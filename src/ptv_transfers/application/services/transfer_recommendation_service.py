"""Transfer recommendation service."""

import asyncio
import logging
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime

from ptv_transfers.application.services.departure_normalizer import (
    normalize_departures,
    parse_instant,
)
from ptv_transfers.application.services.itinerary_assembler import assemble_itinerary
from ptv_transfers.application.services.itinerary_ranker import rank_itineraries
from ptv_transfers.application.services.station_arrival_projector import (
    project_station_arrivals,
    select_next_train,
)
from ptv_transfers.application.services.transfer_matcher import (
    events_for_route,
    find_connection,
)
from ptv_transfers.domain.models.itinerary import Itinerary
from ptv_transfers.domain.models.normalized_event import NormalizedEvent
from ptv_transfers.domain.models.raw_departure import RawDeparture
from ptv_transfers.domain.models.recommendation_result import RecommendationResult
from ptv_transfers.domain.models.route_type import RouteType
from ptv_transfers.domain.models.transfer_network import TransferNetwork
from ptv_transfers.domain.ports.departure_feed_repository import DepartureFeedRepository
from ptv_transfers.domain.ports.recommendation_provider import RecommendationProvider

logger = logging.getLogger(__name__)


class TransferRecommendationService(RecommendationProvider):
    """Service for recommending the fastest train-to-bus transfer."""

    def __init__(
        self,
        departure_repository: DepartureFeedRepository,
        network: TransferNetwork,
        train_max_results: int = 5,
        bus_max_results: int = 10,
    ) -> None:
        """Initialize with a departure feed repository and the network to plan over."""
        self._departure_repository = departure_repository
        self._network = network
        self._train_max_results = train_max_results
        self._bus_max_results = bus_max_results

    @property
    def network(self) -> TransferNetwork:
        """The network this service plans over."""
        return self._network

    async def get_recommendation(self, now: datetime | None = None) -> RecommendationResult:
        """Fetch the train feed and every bus feed concurrently, then recommend.

        Raises:
            UpstreamUnavailableError: If any feed cannot be fetched.
        """
        train_feed, bus_feeds = await self.fetch_feeds()
        return self.compute_recommendation(now or datetime.now(UTC), train_feed, bus_feeds)

    async def fetch_feeds(
        self,
    ) -> tuple[list[RawDeparture], dict[str, list[RawDeparture]]]:
        """Fetch the origin station's trains and each configured bus stop's buses."""
        bus_stops = self._network.bus_stops
        results = await asyncio.gather(
            self._departure_repository.get_departures(
                RouteType.TRAIN,
                self._network.origin_stop_id,
                max_results=self._train_max_results,
            ),
            *(
                self._departure_repository.get_departures(
                    RouteType.BUS, bus_stop.stop_id, max_results=self._bus_max_results
                )
                for bus_stop in bus_stops
            ),
        )
        train_feed = results[0]
        bus_feeds = {bus_stop.key: feed for bus_stop, feed in zip(bus_stops, results[1:])}
        logger.debug(
            f"Fetched {len(train_feed)} train departure(s) and "
            f"{sum(len(f) for f in bus_feeds.values())} bus departure(s)"
        )
        return train_feed, bus_feeds

    def compute_recommendation(
        self,
        now: datetime,
        train_feed: Sequence[RawDeparture],
        bus_feeds: Mapping[str, Sequence[RawDeparture] | None],
    ) -> RecommendationResult:
        """Recommend the fastest itinerary from already-fetched feeds.

        Pure given its arguments. A bus feed that is missing (absent key or None)
        only removes the itineraries that depend on it.
        """
        now = parse_instant(now) or datetime.now(UTC)

        next_train = select_next_train(
            normalize_departures(train_feed), self._network.inbound_direction_id
        )
        if next_train is None:
            logger.info("No upcoming trains in the inbound direction")
            return RecommendationResult(timestamp=now, no_upcoming_service=True)

        station_arrivals = project_station_arrivals(next_train, self._network.stations)

        bus_events: dict[str, list[NormalizedEvent]] = {
            key: normalize_departures(feed) for key, feed in bus_feeds.items() if feed is not None
        }

        itineraries = self._build_itineraries(now, station_arrivals, bus_events)
        best, ranked = rank_itineraries(itineraries)
        if best is None:
            logger.info("No feasible transfer for the next train")

        return RecommendationResult(
            timestamp=now,
            station_arrivals=station_arrivals,
            recommendation=best,
            options=ranked,
        )

    def _build_itineraries(
        self,
        now: datetime,
        station_arrivals: Mapping[str, datetime],
        bus_events: Mapping[str, list[NormalizedEvent]],
    ) -> list[Itinerary]:
        """Build one itinerary per route with a catchable bus, in route order."""
        itineraries: list[Itinerary] = []
        for route in self._network.routes:
            events = bus_events.get(route.bus_stop_key)
            if events is None:
                logger.debug(
                    f"No feed for bus stop '{route.bus_stop_key}', "
                    f"skipping route {route.route_number}"
                )
                continue

            station = self._network.station(route.station_id)
            train_arrival = station_arrivals[station.station_id]
            bus = find_connection(
                train_arrival,
                route.min_transfer_minutes,
                events_for_route(events, route.route_number),
            )
            if bus is None:
                logger.debug(f"No catchable {route.route_number} bus at {station.name}")
                continue

            itineraries.append(
                assemble_itinerary(
                    station.name,
                    train_arrival,
                    bus,
                    route.route_number,
                    route.travel_minutes,
                    now,
                )
            )
        return itineraries
