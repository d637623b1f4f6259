"""Single-request executor shared by all endpoint services."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .errors import FredClientClosedError
from .params import ParamsBuilder, QueryParams
from .transport import QueryPairs

FILE_TYPE_PARAM = ("file_type", "json")


class Transport(Protocol):
    def request(self, endpoint: str, *, params: QueryPairs) -> dict[str, object]: ...
    def probe(self, endpoint: str, *, params: QueryPairs) -> int | None: ...
    def close(self) -> None: ...


def finalize(builder: ParamsBuilder | None) -> QueryParams | None:
    """Build ``builder`` if one was supplied."""

    if builder is None:
        return None
    return builder.build()


def build_request_params(
    required: Sequence[tuple[str, object]],
    *,
    api_key: str,
    query: QueryParams | None,
) -> list[tuple[str, str]]:
    """Positional identifiers, then ``api_key`` and ``file_type``, then builder options."""

    params = [(key, str(value)) for key, value in required]
    params.append(("api_key", api_key))
    params.append(FILE_TYPE_PARAM)
    if query is not None:
        params.extend(query.pairs)
    return params


class RequestExecutor:
    """Adds the mandatory parameters and dispatches through the transport."""

    def __init__(self, transport: Transport, *, api_key: str) -> None:
        self._transport = transport
        self._api_key = api_key
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def mark_closed(self) -> None:
        """Reject every later request; the transport itself is left to its owner."""

        self._closed = True

    @property
    def api_key(self) -> str:
        return self._api_key

    @api_key.setter
    def api_key(self, key: str) -> None:
        self._api_key = key

    def execute(
        self,
        endpoint: str,
        *,
        required: Sequence[tuple[str, object]] = (),
        query: QueryParams | None = None,
    ) -> dict[str, object]:
        if self._closed:
            raise FredClientClosedError("FredClient is already closed")
        params = build_request_params(required, api_key=self._api_key, query=query)
        return self._transport.request(endpoint, params=params)

    def probe(self, *, category_id: int) -> int | None:
        params = build_request_params(
            [("category_id", category_id)],
            api_key=self._api_key,
            query=None,
        )
        return self._transport.probe("category", params=params)


__all__ = [
    "FILE_TYPE_PARAM",
    "Transport",
    "finalize",
    "build_request_params",
    "RequestExecutor",
]
