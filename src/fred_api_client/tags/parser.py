"""Parsers from FRED tag JSON payloads into typed response objects."""

from __future__ import annotations

from ..core.models import ResultEnvelope
from ..core.payload import JsonObject, optional_text, require_int, require_objects, require_text
from .models import Tag, TagsResponse


def _tag_from_item(item: JsonObject) -> Tag:
    return Tag(
        name=require_text(item, "name"),
        group_id=require_text(item, "group_id"),
        created=require_text(item, "created"),
        popularity=require_int(item, "popularity"),
        series_count=require_int(item, "series_count"),
        notes=optional_text(item, "notes"),
    )


def parse_tags_response(payload: JsonObject) -> TagsResponse:
    tags = tuple(_tag_from_item(item) for item in require_objects(payload, "tags"))
    return TagsResponse(envelope=ResultEnvelope.from_payload(payload), tags=tags)


__all__ = [
    "parse_tags_response",
]
