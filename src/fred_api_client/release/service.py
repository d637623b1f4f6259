"""Release endpoints, including the ``releases`` listings."""

from __future__ import annotations

from ..core.executor import RequestExecutor, finalize
from ..core.params import RealtimeParams
from ..series.models import SeriesResponse
from ..series.params import SeriesListParams
from ..series.parser import parse_series_response
from ..source.models import SourcesResponse
from ..source.parser import parse_sources_response
from ..tags.models import TagsResponse
from ..tags.params import RelatedTagsParams, TagsParams
from ..tags.parser import parse_tags_response
from .models import ReleaseDatesResponse, ReleasesResponse, ReleaseTablesResponse
from .params import ReleaseDatesParams, ReleasesDatesParams, ReleasesParams, ReleaseTablesParams
from .parser import (
    parse_release_dates_response,
    parse_release_tables_response,
    parse_releases_response,
)


class ReleaseService:
    """``releases`` and ``release`` endpoint families."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    def get_releases(self, params: ReleasesParams | None = None) -> ReleasesResponse:
        payload = self._executor.execute("releases", query=finalize(params))
        return parse_releases_response(payload)

    def get_all_dates(self, params: ReleasesDatesParams | None = None) -> ReleaseDatesResponse:
        payload = self._executor.execute("releases/dates", query=finalize(params))
        return parse_release_dates_response(payload)

    def get_release(
        self,
        release_id: int,
        params: RealtimeParams | None = None,
    ) -> ReleasesResponse:
        payload = self._executor.execute(
            "release",
            required=[("release_id", release_id)],
            query=finalize(params),
        )
        return parse_releases_response(payload)

    def get_dates(
        self,
        release_id: int,
        params: ReleaseDatesParams | None = None,
    ) -> ReleaseDatesResponse:
        payload = self._executor.execute(
            "release/dates",
            required=[("release_id", release_id)],
            query=finalize(params),
        )
        return parse_release_dates_response(payload)

    def get_series(
        self,
        release_id: int,
        params: SeriesListParams | None = None,
    ) -> SeriesResponse:
        payload = self._executor.execute(
            "release/series",
            required=[("release_id", release_id)],
            query=finalize(params),
        )
        return parse_series_response(payload)

    def get_sources(
        self,
        release_id: int,
        params: RealtimeParams | None = None,
    ) -> SourcesResponse:
        payload = self._executor.execute(
            "release/sources",
            required=[("release_id", release_id)],
            query=finalize(params),
        )
        return parse_sources_response(payload)

    def get_tags(
        self,
        release_id: int,
        params: TagsParams | None = None,
    ) -> TagsResponse:
        payload = self._executor.execute(
            "release/tags",
            required=[("release_id", release_id)],
            query=finalize(params),
        )
        return parse_tags_response(payload)

    def get_related_tags(self, release_id: int, params: RelatedTagsParams) -> TagsResponse:
        query = params.build()
        payload = self._executor.execute(
            "release/related_tags",
            required=[("release_id", release_id)],
            query=query,
        )
        return parse_tags_response(payload)

    def get_tables(
        self,
        release_id: int,
        params: ReleaseTablesParams | None = None,
    ) -> ReleaseTablesResponse:
        payload = self._executor.execute(
            "release/tables",
            required=[("release_id", release_id)],
            query=finalize(params),
        )
        return parse_release_tables_response(payload)


__all__ = [
    "ReleaseService",
]
