"""Route type domain model."""

from enum import IntEnum


class RouteType(IntEnum):
    """PTV route types used by the timetable API."""

    TRAIN = 0
    TRAM = 1
    BUS = 2
