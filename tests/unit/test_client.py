from __future__ import annotations

import logging
import typing

import pytest

from fred_api_client.category.service import CategoryService
from fred_api_client.client import FredClient
from fred_api_client.config import FredClientConfig, TransportConfig
from fred_api_client.core.errors import (
    FredClientClosedError,
    FredClientInitError,
    FredValidationError,
)
from fred_api_client.core.executor import RequestExecutor
from fred_api_client.release.service import ReleaseService
from fred_api_client.series.models import SeriesResponse
from fred_api_client.series.service import SeriesService
from fred_api_client.source.service import SourceService
from fred_api_client.tags.models import TagsResponse
from fred_api_client.tags.service import TagsService
from tests.shared.client_fakes import RecordingTransport, UnreachableTransport


def test_client_context_manager_marks_client_closed():
    transport = RecordingTransport()
    with FredClient(api_key="k", transport=transport) as client:
        assert client is not None
    with pytest.raises(FredClientClosedError):
        client.category.get_category(125)


def test_client_does_not_close_injected_transport():
    transport = RecordingTransport()
    client = FredClient(api_key="k", transport=transport)
    client.close()
    assert transport.closed is False


def test_client_raises_when_used_after_close():
    client = FredClient(api_key="k", transport=RecordingTransport())
    client.close()
    client.close()
    with pytest.raises(FredClientClosedError, match="already closed"):
        client.series.get_series("GNPCA")


def test_client_probes_reachability_on_construction():
    transport = RecordingTransport()
    FredClient(api_key="secret", transport=transport)
    assert transport.probes == [
        (
            "category",
            [("category_id", "125"), ("api_key", "secret"), ("file_type", "json")],
        )
    ]
    assert transport.requests == []


@pytest.mark.parametrize("probe_status", [200, 400, 500, None])
def test_probe_ignores_http_status(probe_status):
    client = FredClient(api_key="k", transport=RecordingTransport(probe_status=probe_status))
    assert client.api_key == "k"


def test_probe_transport_failure_is_init_error():
    with pytest.raises(FredClientInitError, match="failed to reach") as exc_info:
        FredClient(api_key="k", transport=UnreachableTransport())
    assert exc_info.value.cause == "probe"


def test_probe_can_be_disabled():
    transport = UnreachableTransport()
    FredClient(FredClientConfig(probe_on_init=False), api_key="k", transport=transport)
    assert transport.probes == []


def test_client_reads_key_from_environment(monkeypatch):
    monkeypatch.setenv("FRED_API_KEY", "from-env")
    client = FredClient(transport=RecordingTransport())
    assert client.api_key == "from-env"


def test_explicit_key_wins_over_environment(monkeypatch):
    monkeypatch.setenv("FRED_API_KEY", "from-env")
    client = FredClient(api_key="explicit", transport=RecordingTransport())
    assert client.api_key == "explicit"


def test_missing_key_is_empty_and_logged(no_api_key_env, caplog):
    with caplog.at_level(logging.WARNING, logger="fred_api_client"):
        client = FredClient(transport=RecordingTransport())
    assert client.api_key == ""
    assert "FRED_API_KEY" in caplog.text


def test_set_api_key_applies_to_later_requests_without_reprobe():
    transport = RecordingTransport()
    client = FredClient(api_key="old", transport=transport)
    client.set_api_key("new")
    client.category.get_category(125)
    assert len(transport.probes) == 1
    assert ("api_key", "new") in transport.last_params
    assert client.api_key == "new"


def test_invalid_config_is_validation_error():
    config = FredClientConfig(transport=TransportConfig(timeout_read_seconds=0.0))
    with pytest.raises(FredValidationError, match="timeout_read_seconds"):
        FredClient(config, api_key="k", transport=RecordingTransport())


def test_base_url_comes_from_config():
    config = FredClientConfig(base_url="http://localhost:8080/fred", probe_on_init=False)
    client = FredClient(config, api_key="k", transport=RecordingTransport())
    assert client.base_url == "http://localhost:8080/fred"


def test_client_exposes_all_endpoint_families():
    client = FredClient(api_key="k", transport=RecordingTransport())
    for family in ("series", "category", "release", "source", "tags"):
        assert getattr(client, family) is not None
    assert callable(client.release.get_tables)


def test_endpoint_families_are_typed_service_instances():
    client = FredClient(api_key="k", transport=RecordingTransport())
    assert isinstance(client.series, SeriesService)
    assert isinstance(client.category, CategoryService)
    assert isinstance(client.release, ReleaseService)
    assert isinstance(client.source, SourceService)
    assert isinstance(client.tags, TagsService)
    assert typing.get_type_hints(SeriesService.get_series)["return"] is SeriesResponse
    assert typing.get_type_hints(TagsService.get_related_tags)["return"] is TagsResponse


def test_closed_client_sends_nothing(offline_client, recording_transport):
    client = offline_client
    client.close()
    assert client.closed is True
    for call in (
        lambda: client.series.get_observations("GNPCA"),
        lambda: client.release.get_releases(),
        lambda: client.source.get_sources(),
        lambda: client.tags.get_tags(),
    ):
        with pytest.raises(FredClientClosedError):
            call()
    assert recording_transport.requests == []


def test_executor_rejects_requests_once_marked_closed():
    transport = RecordingTransport()
    executor = RequestExecutor(transport, api_key="k")
    executor.execute("category", required=[("category_id", 125)])
    executor.mark_closed()
    with pytest.raises(FredClientClosedError, match="already closed"):
        executor.execute("category", required=[("category_id", 125)])
    assert len(transport.requests) == 1
