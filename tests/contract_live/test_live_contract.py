from __future__ import annotations

import os

import pytest

from fred_api_client import FredClient, FredRemoteError
from fred_api_client.series.params import ObservationsParams, Units
from fred_api_client.tags.params import RelatedTagsParams


pytestmark = pytest.mark.live


def _require_live_flag() -> None:
    if os.getenv("FRED_RUN_LIVE") != "1":
        pytest.skip("Set FRED_RUN_LIVE=1 to run live contract tests")
    if not os.getenv("FRED_API_KEY"):
        pytest.skip("Set FRED_API_KEY to run live contract tests")


def test_live_get_series_contract_minimum():
    _require_live_flag()
    with FredClient() as client:
        result = client.series.get_series("GNPCA")

    assert len(result.seriess) == 1
    assert result.seriess[0].id == "GNPCA"
    assert isinstance(result.seriess[0].popularity, int)


def test_live_get_observations_contract_minimum():
    _require_live_flag()
    with FredClient() as client:
        result = client.series.get_observations(
            "GNPCA",
            ObservationsParams().units(Units.PERCENT_CHANGE).limit(5),
        )

    assert result.units == "pch"
    assert 0 < len(result.observations) <= 5


def test_live_related_tags_contract_minimum():
    _require_live_flag()
    with FredClient() as client:
        result = client.tags.get_related_tags(RelatedTagsParams().tag_name("monetary aggregates"))

    assert isinstance(result.tags, tuple)


def test_live_invalid_key_is_remote_error():
    _require_live_flag()
    with FredClient(api_key="not-a-registered-key") as client:
        with pytest.raises(FredRemoteError, match="ERROR 400"):
            client.category.get_category(125)
