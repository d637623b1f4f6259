"""Parsers from FRED release JSON payloads into typed response objects."""

from __future__ import annotations

from ..core.errors import FredDecodeError
from ..core.models import ResultEnvelope
from ..core.payload import (
    JsonObject,
    optional_numeric_id,
    optional_text,
    require_bool,
    require_int,
    require_numeric_id,
    require_object_map,
    require_objects,
    require_text,
)
from .models import (
    Release,
    ReleaseDate,
    ReleaseDatesResponse,
    ReleasesResponse,
    ReleaseTableElement,
    ReleaseTablesResponse,
)


def _release_from_item(item: JsonObject) -> Release:
    return Release(
        id=require_int(item, "id"),
        realtime_start=require_text(item, "realtime_start"),
        realtime_end=require_text(item, "realtime_end"),
        name=require_text(item, "name"),
        press_release=require_bool(item, "press_release"),
        link=optional_text(item, "link"),
        notes=optional_text(item, "notes"),
    )


def _release_date_from_item(item: JsonObject) -> ReleaseDate:
    return ReleaseDate(
        release_id=require_int(item, "release_id"),
        date=require_text(item, "date"),
        release_name=optional_text(item, "release_name"),
    )


def _element_from_item(item: JsonObject) -> ReleaseTableElement:
    children = tuple(_element_from_item(child) for child in require_objects(item, "children"))
    return ReleaseTableElement(
        element_id=require_numeric_id(item, "element_id"),
        release_id=require_numeric_id(item, "release_id"),
        element_type=require_text(item, "type"),
        name=require_text(item, "name"),
        level=require_text(item, "level"),
        series_id=optional_text(item, "series_id"),
        parent_id=optional_numeric_id(item, "parent_id"),
        line=optional_text(item, "line"),
        children=children,
    )


def _release_id_text(payload: JsonObject) -> str:
    # The table root reports release_id as a string, elements as integers.
    raw = payload.get("release_id")
    if isinstance(raw, int) and not isinstance(raw, bool):
        return str(raw)
    if raw is None:
        raise FredDecodeError("missing field `release_id`")
    return require_text(payload, "release_id")


def parse_releases_response(payload: JsonObject) -> ReleasesResponse:
    releases = tuple(_release_from_item(item) for item in require_objects(payload, "releases"))
    return ReleasesResponse(envelope=ResultEnvelope.from_payload(payload), releases=releases)


def parse_release_dates_response(payload: JsonObject) -> ReleaseDatesResponse:
    dates = tuple(
        _release_date_from_item(item) for item in require_objects(payload, "release_dates")
    )
    return ReleaseDatesResponse(envelope=ResultEnvelope.from_payload(payload), release_dates=dates)


def parse_release_tables_response(payload: JsonObject) -> ReleaseTablesResponse:
    elements = {
        key: _element_from_item(item)
        for key, item in require_object_map(payload, "elements").items()
    }
    return ReleaseTablesResponse(
        release_id=_release_id_text(payload),
        elements=elements,
        name=optional_text(payload, "name"),
        element_id=optional_numeric_id(payload, "element_id"),
    )


__all__ = [
    "parse_releases_response",
    "parse_release_dates_response",
    "parse_release_tables_response",
]
