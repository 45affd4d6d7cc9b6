"""Tests for PTV request signing."""

import hashlib
import hmac

from ptv_transfers.adapters.ptv_api.request_signer import sign_request

BASE_URL = "https://timetableapi.ptv.vic.gov.au"


def _expected_signature(url: str, key: str) -> str:
    return hmac.new(key.encode(), url.encode(), hashlib.sha1).hexdigest().upper()


def test_when_path_has_query_then_devid_is_appended_with_ampersand() -> None:
    """Given a path with a query, when signing, then devid and signature are appended."""
    path = "/v3/departures/route_type/0/stop/1137?max_results=5&expand=route"

    signed = sign_request(path, "3000123", "secret-key", BASE_URL)

    expected_url = f"{path}&devid=3000123"
    assert signed == (
        f"{BASE_URL}{expected_url}&signature={_expected_signature(expected_url, 'secret-key')}"
    )


def test_when_path_has_no_query_then_devid_starts_query() -> None:
    """Given a path without a query, when signing, then devid starts the query string."""
    signed = sign_request("/v3/routes", "3000123", "secret-key", BASE_URL)

    assert signed.startswith(f"{BASE_URL}/v3/routes?devid=3000123&signature=")


def test_signature_is_upper_case_sha1_hex() -> None:
    """Given any request, when signing, then the signature is 40 upper-case hex characters."""
    signed = sign_request("/v3/routes", "1", "k", BASE_URL)

    signature = signed.rsplit("signature=", 1)[1]
    assert len(signature) == 40
    assert signature == signature.upper()
    int(signature, 16)


def test_different_keys_give_different_signatures() -> None:
    """Given two keys, when signing the same path, then signatures differ."""
    assert sign_request("/v3/routes", "1", "a", BASE_URL) != sign_request(
        "/v3/routes", "1", "b", BASE_URL
    )
