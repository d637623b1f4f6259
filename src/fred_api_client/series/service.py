"""Series endpoints."""

from __future__ import annotations

from ..category.models import CategoriesResponse
from ..category.parser import parse_categories_response
from ..core.executor import RequestExecutor, finalize
from ..core.params import RealtimeParams
from ..release.models import ReleasesResponse
from ..release.parser import parse_releases_response
from ..tags.models import TagsResponse
from ..tags.parser import parse_tags_response
from .models import ObservationsResponse, SeriesResponse, SeriesUpdatesResponse, VintageDatesResponse
from .params import (
    ObservationsParams,
    SeriesSearchParams,
    SeriesSearchRelatedTagsParams,
    SeriesSearchTagsParams,
    SeriesTagsParams,
    SeriesUpdatesParams,
    VintageDatesParams,
)
from .parser import (
    parse_observations_response,
    parse_series_response,
    parse_series_updates_response,
    parse_vintage_dates_response,
)


class SeriesService:
    """``series`` endpoint family."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    def get_series(
        self,
        series_id: str,
        params: RealtimeParams | None = None,
    ) -> SeriesResponse:
        payload = self._executor.execute(
            "series",
            required=[("series_id", series_id)],
            query=finalize(params),
        )
        return parse_series_response(payload)

    def get_categories(
        self,
        series_id: str,
        params: RealtimeParams | None = None,
    ) -> CategoriesResponse:
        payload = self._executor.execute(
            "series/categories",
            required=[("series_id", series_id)],
            query=finalize(params),
        )
        return parse_categories_response(payload)

    def get_observations(
        self,
        series_id: str,
        params: ObservationsParams | None = None,
    ) -> ObservationsResponse:
        payload = self._executor.execute(
            "series/observations",
            required=[("series_id", series_id)],
            query=finalize(params),
        )
        return parse_observations_response(payload)

    def get_release(
        self,
        series_id: str,
        params: RealtimeParams | None = None,
    ) -> ReleasesResponse:
        payload = self._executor.execute(
            "series/release",
            required=[("series_id", series_id)],
            query=finalize(params),
        )
        return parse_releases_response(payload)

    def get_tags(
        self,
        series_id: str,
        params: SeriesTagsParams | None = None,
    ) -> TagsResponse:
        payload = self._executor.execute(
            "series/tags",
            required=[("series_id", series_id)],
            query=finalize(params),
        )
        return parse_tags_response(payload)

    def get_updates(self, params: SeriesUpdatesParams | None = None) -> SeriesUpdatesResponse:
        payload = self._executor.execute("series/updates", query=finalize(params))
        return parse_series_updates_response(payload)

    def get_vintage_dates(
        self,
        series_id: str,
        params: VintageDatesParams | None = None,
    ) -> VintageDatesResponse:
        payload = self._executor.execute(
            "series/vintagedates",
            required=[("series_id", series_id)],
            query=finalize(params),
        )
        return parse_vintage_dates_response(payload)

    def search(
        self,
        search_text: str,
        params: SeriesSearchParams | None = None,
    ) -> SeriesResponse:
        payload = self._executor.execute(
            "series/search",
            required=[("search_text", search_text)],
            query=finalize(params),
        )
        return parse_series_response(payload)

    def search_tags(
        self,
        series_search_text: str,
        params: SeriesSearchTagsParams | None = None,
    ) -> TagsResponse:
        payload = self._executor.execute(
            "series/search/tags",
            required=[("series_search_text", series_search_text)],
            query=finalize(params),
        )
        return parse_tags_response(payload)

    def search_related_tags(
        self,
        series_search_text: str,
        params: SeriesSearchRelatedTagsParams,
    ) -> TagsResponse:
        query = params.build()
        payload = self._executor.execute(
            "series/search/related_tags",
            required=[("series_search_text", series_search_text)],
            query=query,
        )
        return parse_tags_response(payload)


__all__ = [
    "SeriesService",
]
