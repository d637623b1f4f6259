from __future__ import annotations

import pytest


@pytest.mark.parametrize(
    ("filename", "collection"),
    [
        ("series_gnpca.json", "seriess"),
        ("series_observations_gnpca.json", "observations"),
        ("series_updates.json", "seriess"),
        ("series_search_tags_monetary.json", "tags"),
        ("category_children_13.json", "categories"),
        ("releases.json", "releases"),
        ("releases_dates.json", "release_dates"),
        ("sources.json", "sources"),
        ("series_vintagedates_gnpca.json", "vintage_dates"),
    ],
)
def test_success_fixture_has_collection_and_no_error_code(fixture_loader, filename, collection):
    payload = fixture_loader(filename)
    assert isinstance(payload[collection], list)
    assert "error_code" not in payload


def test_release_tables_fixture_is_keyed_by_element_id(fixture_loader):
    payload = fixture_loader("release_tables_53.json")
    assert isinstance(payload["elements"], dict)
    for key, element in payload["elements"].items():
        assert key == str(element["element_id"])


def test_error_fixture_has_envelope_keys(fixture_loader):
    payload = fixture_loader("error_bad_request.json")
    assert set(payload) == {"error_code", "error_message"}
    assert payload["error_code"] == 400


def test_fixture_loader_accepts_bare_names(fixture_loader):
    assert fixture_loader("sources") == fixture_loader("sources.json")
