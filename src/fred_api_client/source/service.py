"""Source endpoints, including the ``sources`` listing."""

from __future__ import annotations

from ..core.executor import RequestExecutor, finalize
from ..core.params import RealtimeParams
from ..release.models import ReleasesResponse
from ..release.params import ReleasesParams
from ..release.parser import parse_releases_response
from .models import SourcesResponse
from .params import SourcesParams
from .parser import parse_sources_response


class SourceService:
    """``sources`` and ``source`` endpoint families."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    def get_sources(self, params: SourcesParams | None = None) -> SourcesResponse:
        payload = self._executor.execute("sources", query=finalize(params))
        return parse_sources_response(payload)

    def get_source(
        self,
        source_id: int,
        params: RealtimeParams | None = None,
    ) -> SourcesResponse:
        payload = self._executor.execute(
            "source",
            required=[("source_id", source_id)],
            query=finalize(params),
        )
        return parse_sources_response(payload)

    def get_releases(
        self,
        source_id: int,
        params: ReleasesParams | None = None,
    ) -> ReleasesResponse:
        payload = self._executor.execute(
            "source/releases",
            required=[("source_id", source_id)],
            query=finalize(params),
        )
        return parse_releases_response(payload)


__all__ = [
    "SourceService",
]
