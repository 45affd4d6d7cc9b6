"""HMAC-SHA1 request signing for the PTV Timetable API."""

import hashlib
import hmac


def sign_request(request_path: str, dev_id: str, api_key: str, base_url: str) -> str:
    """Return the fully signed URL for a request path.

    The developer id is appended to the path and query, the result is signed
    with the API key and the upper-case hex digest is appended as ``signature``.

    Args:
        request_path: Path and query, e.g. "/v3/departures/route_type/0/stop/1137?max_results=5".
        dev_id: PTV developer id.
        api_key: PTV API key used as the HMAC secret.
        base_url: API base URL without trailing slash.
    """
    separator = "&" if "?" in request_path else "?"
    url = f"{request_path}{separator}devid={dev_id}"
    signature = (
        hmac.new(api_key.encode("utf-8"), url.encode("utf-8"), hashlib.sha1).hexdigest().upper()
    )
    return f"{base_url}{url}&signature={signature}"
