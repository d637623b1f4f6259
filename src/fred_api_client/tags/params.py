"""Request parameter builders for tag listings."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, TypeVar

from ..core.params import PagingMixin, RealtimeMixin, SortMixin, TagFilterMixin, TagNamesMixin

_B = TypeVar("_B", bound="TagsParams")


class TagGroupId(Enum):
    FREQUENCY = "freq"
    GENERAL = "gen"
    GEOGRAPHY = "geo"
    GEOGRAPHY_TYPE = "geot"
    RELEASE = "rls"
    SEASONAL_ADJUSTMENT = "seas"
    SOURCE = "src"
    CITATION_AND_COPYRIGHT = "cc"


class TagOrderBy(Enum):
    SERIES_COUNT = "series_count"
    POPULARITY = "popularity"
    CREATED = "created"
    NAME = "name"
    GROUP_ID = "group_id"


class TagsParams(RealtimeMixin, TagNamesMixin, PagingMixin, SortMixin):
    """Options for ``tags``, ``category/tags`` and ``release/tags``."""

    search_text_key: ClassVar[str] = "search_text"

    def tag_group_id(self: _B, group: TagGroupId) -> _B:
        # No server default: every group narrows the result.
        return self._append_choice("tag_group_id", group, TagGroupId)

    def search_text(self: _B, text: str) -> _B:
        return self._append(self.search_text_key, text)

    def order_by(self: _B, order: TagOrderBy) -> _B:
        return self._append_choice("order_by", order, TagOrderBy, default=TagOrderBy.SERIES_COUNT)


class RelatedTagsParams(TagFilterMixin, TagsParams):
    """Options for the related-tags endpoints; at least one ``tag_name`` is required."""

    requires_tag_names = True


__all__ = [
    "TagGroupId",
    "TagOrderBy",
    "TagsParams",
    "RelatedTagsParams",
]
