"""Request parameter builders for release endpoints."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from ..core.params import PagingMixin, ParamsBuilder, RealtimeMixin, SortMixin, SortOrder

_B = TypeVar("_B", bound=ParamsBuilder)

RELEASE_DATES_LIMIT_CEILING = 10_000


class ReleaseOrderBy(Enum):
    RELEASE_ID = "release_id"
    NAME = "name"
    PRESS_RELEASE = "press_release"
    REALTIME_START = "realtime_start"
    REALTIME_END = "realtime_end"


class ReleaseDateOrderBy(Enum):
    RELEASE_DATE = "release_date"
    RELEASE_ID = "release_id"
    RELEASE_NAME = "release_name"


class _NoDataDatesMixin(ParamsBuilder):
    def include_release_dates_with_no_data(self: _B) -> _B:
        return self._append("include_release_dates_with_no_data", "true")


class ReleasesParams(RealtimeMixin, PagingMixin, SortMixin):
    """Options for ``releases`` and ``source/releases``."""

    def order_by(self: _B, order: ReleaseOrderBy) -> _B:
        return self._append_choice(
            "order_by", order, ReleaseOrderBy, default=ReleaseOrderBy.RELEASE_ID
        )


class ReleasesDatesParams(RealtimeMixin, PagingMixin, SortMixin, _NoDataDatesMixin):
    """Options for ``releases/dates``; newest dates come first by default."""

    default_sort_order = SortOrder.DESCENDING

    def order_by(self: _B, order: ReleaseDateOrderBy) -> _B:
        return self._append_choice(
            "order_by", order, ReleaseDateOrderBy, default=ReleaseDateOrderBy.RELEASE_DATE
        )


class ReleaseDatesParams(RealtimeMixin, PagingMixin, SortMixin, _NoDataDatesMixin):
    """Options for ``release/dates``."""

    limit_ceiling = RELEASE_DATES_LIMIT_CEILING


class ReleaseTablesParams(ParamsBuilder):
    """Options for ``release/tables``."""

    def element_id(self: _B, element_id: int) -> _B:
        return self._append("element_id", element_id)

    def include_observation_values(self: _B) -> _B:
        return self._append("include_observation_values", "true")

    def observation_date(self: _B, date: str) -> _B:
        return self._append("observation_date", date)


__all__ = [
    "RELEASE_DATES_LIMIT_CEILING",
    "ReleaseOrderBy",
    "ReleaseDateOrderBy",
    "ReleasesParams",
    "ReleasesDatesParams",
    "ReleaseDatesParams",
    "ReleaseTablesParams",
]
