from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from fred_api_client.core.models import ResultEnvelope
from fred_api_client.release.models import ReleaseTableElement, ReleaseTablesResponse
from fred_api_client.series.models import Observation, ObservationsResponse, SeriesResponse
from fred_api_client.tags.models import Tag, TagsResponse


def test_series_response_collection_is_tuple_and_immutable():
    response = SeriesResponse(envelope=ResultEnvelope(), seriess=[])
    assert isinstance(response.seriess, tuple)
    with pytest.raises(FrozenInstanceError):
        response.seriess = ()  # type: ignore[misc]


def test_observations_response_collection_is_tuple():
    response = ObservationsResponse(
        envelope=ResultEnvelope(),
        observation_start="1600-01-01",
        observation_end="9999-12-31",
        units="lin",
        output_type=1,
        file_type="json",
        observations=[Observation("2026-01-01", "2026-01-01", "2024-01-01", "1.0")],
    )
    assert isinstance(response.observations, tuple)
    assert str(response) == "(2024-01-01: 1.0)\n"


def test_release_tables_elements_are_read_only():
    element = ReleaseTableElement(
        element_id=1,
        release_id=53,
        element_type="header",
        name="Header",
        level="0",
        children=[],
    )
    response = ReleaseTablesResponse(release_id="53", elements={"1": element})
    assert element.children == ()
    with pytest.raises(TypeError):
        response.elements["2"] = element  # type: ignore[index]


def test_tags_response_str_lists_tag_names():
    response = TagsResponse(
        envelope=ResultEnvelope(),
        tags=[Tag(name="usa", group_id="geo", created="c", popularity=1, series_count=2)],
    )
    assert isinstance(response.tags, tuple)
    assert "Tag usa" in str(response)
