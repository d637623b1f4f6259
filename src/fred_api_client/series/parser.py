"""Parsers from FRED series JSON payloads into typed response objects."""

from __future__ import annotations

from ..core.models import ResultEnvelope
from ..core.payload import (
    JsonObject,
    optional_int,
    optional_text,
    require_int,
    require_objects,
    require_text,
    require_texts,
)
from .models import (
    Observation,
    ObservationsResponse,
    Series,
    SeriesResponse,
    SeriesUpdatesResponse,
    VintageDatesResponse,
)

_SERIES_TEXT_FIELDS: tuple[str, ...] = (
    "id",
    "realtime_start",
    "realtime_end",
    "title",
    "observation_start",
    "observation_end",
    "frequency",
    "frequency_short",
    "units",
    "units_short",
    "seasonal_adjustment",
    "seasonal_adjustment_short",
    "last_updated",
)


def _series_from_item(item: JsonObject) -> Series:
    fields = {name: require_text(item, name) for name in _SERIES_TEXT_FIELDS}
    return Series(
        **fields,
        popularity=require_int(item, "popularity"),
        group_popularity=optional_int(item, "group_popularity"),
        notes=optional_text(item, "notes"),
    )


def _observation_from_item(item: JsonObject) -> Observation:
    return Observation(
        realtime_start=require_text(item, "realtime_start"),
        realtime_end=require_text(item, "realtime_end"),
        date=require_text(item, "date"),
        value=require_text(item, "value"),
    )


def parse_series_response(payload: JsonObject) -> SeriesResponse:
    series = tuple(_series_from_item(item) for item in require_objects(payload, "seriess"))
    return SeriesResponse(envelope=ResultEnvelope.from_payload(payload), seriess=series)


def parse_observations_response(payload: JsonObject) -> ObservationsResponse:
    observations = tuple(
        _observation_from_item(item) for item in require_objects(payload, "observations")
    )
    return ObservationsResponse(
        envelope=ResultEnvelope.from_payload(payload),
        observation_start=require_text(payload, "observation_start"),
        observation_end=require_text(payload, "observation_end"),
        units=require_text(payload, "units"),
        output_type=require_int(payload, "output_type"),
        file_type=require_text(payload, "file_type"),
        observations=observations,
    )


def parse_series_updates_response(payload: JsonObject) -> SeriesUpdatesResponse:
    series = tuple(_series_from_item(item) for item in require_objects(payload, "seriess"))
    return SeriesUpdatesResponse(
        envelope=ResultEnvelope.from_payload(payload),
        filter_variable=require_text(payload, "filter_variable"),
        filter_value=require_text(payload, "filter_value"),
        seriess=series,
    )


def parse_vintage_dates_response(payload: JsonObject) -> VintageDatesResponse:
    return VintageDatesResponse(
        envelope=ResultEnvelope.from_payload(payload),
        vintage_dates=require_texts(payload, "vintage_dates"),
    )


__all__ = [
    "parse_series_response",
    "parse_observations_response",
    "parse_series_updates_response",
    "parse_vintage_dates_response",
]
