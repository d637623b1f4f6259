"""Category endpoints."""

from __future__ import annotations

from ..core.executor import RequestExecutor, finalize
from ..core.params import RealtimeParams
from ..series.models import SeriesResponse
from ..series.params import SeriesListParams
from ..series.parser import parse_series_response
from ..tags.models import TagsResponse
from ..tags.params import RelatedTagsParams, TagsParams
from ..tags.parser import parse_tags_response
from .models import CategoriesResponse
from .parser import parse_categories_response


class CategoryService:
    """``category`` endpoint family."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    def get_category(self, category_id: int) -> CategoriesResponse:
        payload = self._executor.execute("category", required=[("category_id", category_id)])
        return parse_categories_response(payload)

    def get_children(
        self,
        category_id: int,
        params: RealtimeParams | None = None,
    ) -> CategoriesResponse:
        payload = self._executor.execute(
            "category/children",
            required=[("category_id", category_id)],
            query=finalize(params),
        )
        return parse_categories_response(payload)

    def get_related(
        self,
        category_id: int,
        params: RealtimeParams | None = None,
    ) -> CategoriesResponse:
        payload = self._executor.execute(
            "category/related",
            required=[("category_id", category_id)],
            query=finalize(params),
        )
        return parse_categories_response(payload)

    def get_series(
        self,
        category_id: int,
        params: SeriesListParams | None = None,
    ) -> SeriesResponse:
        payload = self._executor.execute(
            "category/series",
            required=[("category_id", category_id)],
            query=finalize(params),
        )
        return parse_series_response(payload)

    def get_tags(
        self,
        category_id: int,
        params: TagsParams | None = None,
    ) -> TagsResponse:
        payload = self._executor.execute(
            "category/tags",
            required=[("category_id", category_id)],
            query=finalize(params),
        )
        return parse_tags_response(payload)

    def get_related_tags(self, category_id: int, params: RelatedTagsParams) -> TagsResponse:
        query = params.build()
        payload = self._executor.execute(
            "category/related_tags",
            required=[("category_id", category_id)],
            query=query,
        )
        return parse_tags_response(payload)


__all__ = [
    "CategoryService",
]
