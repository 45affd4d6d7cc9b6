"""Ranking of candidate itineraries."""

from collections.abc import Iterable

from ptv_transfers.domain.models.itinerary import Itinerary


def rank_itineraries(
    itineraries: Iterable[Itinerary],
) -> tuple[Itinerary | None, list[Itinerary]]:
    """Sort itineraries by arrival at the destination, earliest first.

    The sort is stable, so simultaneous arrivals keep their construction order.

    Returns:
        Tuple of (best itinerary or None, all itineraries in ranked order).
    """
    ranked = sorted(itineraries, key=lambda i: i.destination_arrival)
    return (ranked[0] if ranked else None), ranked
