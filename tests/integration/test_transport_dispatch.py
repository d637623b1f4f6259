from __future__ import annotations

import httpx
import pytest

from fred_api_client.client import FredClient
from fred_api_client.core.errors import (
    FredClientInitError,
    FredDecodeError,
    FredRemoteError,
    FredTransportError,
)
from fred_api_client.core.transport import SyncTransport
from tests.shared.payloads import make_categories_payload, make_error_payload, make_series_payload
from tests.shared.transport import Response, SyncSequencedClient, build_config


def _transport(*steps):
    client = SyncSequencedClient(list(steps))
    return SyncTransport(build_config(), client=client), client


def test_error_envelope_is_remote_error():
    transport, _ = _transport(Response(400, make_error_payload()))
    with pytest.raises(FredRemoteError) as exc_info:
        transport.request("series", params=[("series_id", "GNPCA")])
    assert str(exc_info.value) == (
        "ERROR 400: Bad Request.  The value for variable api_key is not registered."
    )
    assert exc_info.value.http_status == 400


def test_success_body_is_returned_even_with_error_status():
    transport, _ = _transport(Response(400, make_series_payload()))
    payload = transport.request("series", params=[("series_id", "GNPCA")])
    assert payload["seriess"]


def test_error_envelope_with_http_200_is_still_remote_error():
    transport, _ = _transport(Response(200, make_error_payload(500, "Internal Server Error")))
    with pytest.raises(FredRemoteError, match="ERROR 500: Internal Server Error"):
        transport.request("tags", params=[])


def test_non_json_body_is_decode_error():
    transport, _ = _transport(Response(502, ValueError("Expecting value: line 1 column 1 (char 0)")))
    with pytest.raises(FredDecodeError, match="Expecting value"):
        transport.request("series", params=[])


def test_client_exception_is_transport_error():
    transport, _ = _transport(httpx.ConnectError("connection refused"))
    with pytest.raises(FredTransportError, match="connection refused") as exc_info:
        transport.request("series", params=[])
    assert exc_info.value.cause == "network"


def test_transport_strips_leading_slash_and_passes_pairs_in_order():
    transport, client = _transport(Response(200, make_categories_payload()))
    transport.request("/category", params=[("category_id", "125"), ("file_type", "json")])
    assert client.calls == [("category", [("category_id", "125"), ("file_type", "json")])]


def test_closed_transport_rejects_requests():
    transport, client = _transport()
    transport.close()
    assert client.closed is False
    with pytest.raises(FredTransportError, match="already closed"):
        transport.request("series", params=[])


def test_probe_returns_status_without_decoding_body():
    transport, _ = _transport(Response(500, ValueError("not json")))
    assert transport.probe("category", params=[("category_id", "125")]) == 500


def test_client_over_sequenced_http_client_decodes_endpoint():
    http_client = SyncSequencedClient(
        [
            Response(200, make_categories_payload()),
            Response(200, make_categories_payload([(13, "Trade", 0)])),
        ]
    )
    transport = SyncTransport(build_config(), client=http_client)
    client = FredClient(build_config(probe_on_init=True), api_key="k", transport=transport)
    response = client.category.get_category(13)
    assert response.categories[0].name == "Trade"
    assert http_client.calls[1] == (
        "category",
        [("category_id", "13"), ("api_key", "k"), ("file_type", "json")],
    )


def test_client_probe_over_failing_http_client_is_init_error():
    http_client = SyncSequencedClient([httpx.ConnectTimeout("timed out")])
    transport = SyncTransport(build_config(), client=http_client)
    with pytest.raises(FredClientInitError, match="timed out"):
        FredClient(build_config(probe_on_init=True), api_key="k", transport=transport)


def test_transport_over_httpx_mock_transport():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/fred/series/observations"
        assert request.url.params["series_id"] == "GNPCA"
        return httpx.Response(200, json=make_error_payload(400, "Bad Request."))

    http_client = httpx.Client(
        base_url="https://api.stlouisfed.org/fred/",
        transport=httpx.MockTransport(handler),
    )
    transport = SyncTransport(build_config(), client=http_client)
    with pytest.raises(FredRemoteError, match="ERROR 400: Bad Request."):
        transport.request("series/observations", params=[("series_id", "GNPCA")])
    http_client.close()


def test_malformed_error_envelope_reports_success_shape_failure():
    http_client = SyncSequencedClient([Response(200, {"error_code": "oops", "seriess": "x"})])
    transport = SyncTransport(build_config(), client=http_client)
    client = FredClient(build_config(), api_key="k", transport=transport)
    with pytest.raises(FredDecodeError, match="invalid type for field `seriess`"):
        client.series.get_series("GNPCA")


def test_malformed_error_envelope_with_valid_success_shape_decodes():
    body = {**make_series_payload(), "error_code": None}
    transport, _ = _transport(Response(200, body))
    assert transport.request("series", params=[])["seriess"]
