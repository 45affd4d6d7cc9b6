"""Normalization of raw departure records into timed events."""

import logging
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from ptv_transfers.domain.errors import MalformedRecordError
from ptv_transfers.domain.models.normalized_event import NormalizedEvent
from ptv_transfers.domain.models.raw_departure import RawDeparture

logger = logging.getLogger(__name__)

# Instants this close to the end of the datetime range cannot be shifted by
# offsets or travel times without overflowing.
LATEST_USABLE_INSTANT = datetime.max.replace(tzinfo=UTC) - timedelta(days=1)


def parse_instant(value: str | datetime | None) -> datetime | None:
    """Parse an ISO 8601 timestamp into an aware UTC datetime.

    Naive values are taken to be UTC, which is what the PTV feed reports.
    Returns None for empty, unparseable or out-of-range input.
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        instant = value
    else:
        try:
            instant = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
        except ValueError:
            return None

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    try:
        return instant.astimezone(UTC)
    except OverflowError:
        return None


def normalize_departure(raw: RawDeparture) -> NormalizedEvent:
    """Resolve a raw departure to a single departure instant.

    The estimated (real-time) departure wins over the scheduled one.

    Raises:
        MalformedRecordError: If neither time can be parsed, or the resolved time
            is too close to the end of the datetime range to plan with.
    """
    estimated = parse_instant(raw.estimated_departure)
    scheduled = parse_instant(raw.scheduled_departure)
    resolved = estimated or scheduled
    if resolved is None:
        raise MalformedRecordError(
            f"Departure on route {raw.route_id} has no usable time "
            f"(scheduled={raw.scheduled_departure!r}, estimated={raw.estimated_departure!r})"
        )
    if resolved > LATEST_USABLE_INSTANT:
        raise MalformedRecordError(
            f"Departure on route {raw.route_id} is out of range: {resolved.isoformat()}"
        )

    return NormalizedEvent(
        route_id=raw.route_id,
        departure_time=resolved,
        direction_id=raw.direction_id,
        route_number=raw.route_number,
        is_realtime=estimated is not None,
    )


def normalize_departures(raw_departures: Iterable[RawDeparture]) -> list[NormalizedEvent]:
    """Normalize a sequence of departures, keeping input order.

    Malformed records are left out of the result.
    """
    events: list[NormalizedEvent] = []
    for raw in raw_departures:
        try:
            events.append(normalize_departure(raw))
        except MalformedRecordError as e:
            logger.debug(f"Skipping departure: {e}")
    return events
