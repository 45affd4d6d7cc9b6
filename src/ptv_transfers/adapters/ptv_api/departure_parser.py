"""Parser for PTV departures responses."""

import logging
from typing import Any

from ptv_transfers.domain.models.raw_departure import RawDeparture

logger = logging.getLogger(__name__)


class DepartureParser:
    """Parses PTV v3 departures responses into RawDeparture objects."""

    @staticmethod
    def parse_departures(data: dict[str, Any]) -> list[RawDeparture]:
        """Parse the 'departures' list, resolving route numbers from 'routes'.

        Entries that are not objects or have no route id are skipped. Timestamps
        are passed through unparsed.
        """
        departures = data.get("departures") or []
        if not isinstance(departures, list):
            logger.warning("PTV response 'departures' is not a list")
            return []

        route_numbers = DepartureParser._route_numbers(data.get("routes"))

        results = []
        for dep in departures:
            departure = DepartureParser._parse_departure(dep, route_numbers)
            if departure:
                results.append(departure)
        return results

    @staticmethod
    def _route_numbers(routes: Any) -> dict[str, str]:
        """Map route id to route number, falling back to the short name."""
        if not isinstance(routes, dict):
            return {}

        numbers: dict[str, str] = {}
        for route_id, route in routes.items():
            if not isinstance(route, dict):
                continue
            number = route.get("route_number") or route.get("route_short_name")
            if number:
                numbers[str(route_id)] = str(number)
        return numbers

    @staticmethod
    def _parse_departure(dep: Any, route_numbers: dict[str, str]) -> RawDeparture | None:
        """Parse a single departure entry."""
        if not isinstance(dep, dict):
            return None

        route_id = dep.get("route_id")
        if route_id is None:
            return None

        return RawDeparture(
            route_id=str(route_id),
            scheduled_departure=dep.get("scheduled_departure_utc"),
            estimated_departure=dep.get("estimated_departure_utc"),
            direction_id=DepartureParser._parse_int(dep.get("direction_id")),
            route_number=route_numbers.get(str(route_id)),
        )

    @staticmethod
    def _parse_int(value: Any) -> int | None:
        """Parse an optional integer field."""
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None
