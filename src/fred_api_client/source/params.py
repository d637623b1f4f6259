"""Request parameter builders for source endpoints."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from ..core.params import PagingMixin, RealtimeMixin, SortMixin

_B = TypeVar("_B", bound="SourcesParams")


class SourceOrderBy(Enum):
    SOURCE_ID = "source_id"
    NAME = "name"
    REALTIME_START = "realtime_start"
    REALTIME_END = "realtime_end"


class SourcesParams(RealtimeMixin, PagingMixin, SortMixin):
    """Options for ``sources``."""

    def order_by(self: _B, order: SourceOrderBy) -> _B:
        return self._append_choice(
            "order_by", order, SourceOrderBy, default=SourceOrderBy.SOURCE_ID
        )


__all__ = [
    "SourceOrderBy",
    "SourcesParams",
]
