"""Tag endpoints: ``tags``, ``tags/series`` and ``related_tags``."""

from __future__ import annotations

from ..core.executor import RequestExecutor, finalize
from ..series.models import SeriesResponse
from ..series.params import TagsSeriesParams
from ..series.parser import parse_series_response
from .models import TagsResponse
from .params import RelatedTagsParams, TagsParams
from .parser import parse_tags_response


class TagsService:
    """``tags`` endpoint family."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    def get_tags(self, params: TagsParams | None = None) -> TagsResponse:
        payload = self._executor.execute("tags", query=finalize(params))
        return parse_tags_response(payload)

    def get_series(self, params: TagsSeriesParams) -> SeriesResponse:
        query = params.build()
        payload = self._executor.execute("tags/series", query=query)
        return parse_series_response(payload)

    def get_related_tags(self, params: RelatedTagsParams) -> TagsResponse:
        query = params.build()
        payload = self._executor.execute("related_tags", query=query)
        return parse_tags_response(payload)


__all__ = [
    "TagsService",
]
