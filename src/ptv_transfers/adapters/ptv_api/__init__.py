"""PTV Timetable API adapters."""

from ptv_transfers.adapters.ptv_api.http_client import PtvHttpClient
from ptv_transfers.adapters.ptv_api.ptv_departure_repository import PtvDepartureRepository

__all__ = ["PtvDepartureRepository", "PtvHttpClient"]
