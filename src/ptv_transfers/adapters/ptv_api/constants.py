"""Constants for the PTV Timetable API adapter.

API Documentation: https://timetableapi.ptv.vic.gov.au/swagger/ui/index
Requests are authenticated with a developer id and an HMAC-SHA1 signature.
"""

PTV_BASE_URL = "https://timetableapi.ptv.vic.gov.au"
PTV_DEPARTURES_PATH = "/v3/departures/route_type/{route_type}/stop/{stop_id}"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}
