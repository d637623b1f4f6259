"""Parsers from FRED category JSON payloads into typed response objects."""

from __future__ import annotations

from ..core.payload import JsonObject, optional_text, require_int, require_objects, require_text
from .models import CategoriesResponse, Category


def _category_from_item(item: JsonObject) -> Category:
    return Category(
        id=require_int(item, "id"),
        name=require_text(item, "name"),
        parent_id=require_int(item, "parent_id"),
        notes=optional_text(item, "notes"),
    )


def parse_categories_response(payload: JsonObject) -> CategoriesResponse:
    categories = tuple(
        _category_from_item(item) for item in require_objects(payload, "categories")
    )
    return CategoriesResponse(categories=categories)


__all__ = [
    "parse_categories_response",
]
