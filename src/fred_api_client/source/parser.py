"""Parsers from FRED source JSON payloads into typed response objects."""

from __future__ import annotations

from ..core.models import ResultEnvelope
from ..core.payload import JsonObject, optional_text, require_int, require_objects, require_text
from .models import Source, SourcesResponse


def _source_from_item(item: JsonObject) -> Source:
    return Source(
        id=require_int(item, "id"),
        realtime_start=require_text(item, "realtime_start"),
        realtime_end=require_text(item, "realtime_end"),
        name=require_text(item, "name"),
        link=optional_text(item, "link"),
        notes=optional_text(item, "notes"),
    )


def parse_sources_response(payload: JsonObject) -> SourcesResponse:
    sources = tuple(_source_from_item(item) for item in require_objects(payload, "sources"))
    return SourcesResponse(envelope=ResultEnvelope.from_payload(payload), sources=sources)


__all__ = [
    "parse_sources_response",
]
