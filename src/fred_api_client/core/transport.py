"""Synchronous HTTP transport with error-envelope evaluation."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Protocol

import httpx

from ..config import FredClientConfig
from .errors import FredDecodeError, FredTransportError
from .response_parsing import classify_payload_outcome, parse_json_payload

logger = logging.getLogger("fred_api_client")

QueryPairs = Sequence[tuple[str, str]]


class SyncTransportClient(Protocol):
    def get(self, endpoint: str, params: QueryPairs) -> object: ...
    def close(self) -> None: ...


def build_default_headers(config: FredClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: FredClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


class SyncTransport:
    """Synchronous transport for FRED API."""

    def __init__(
        self,
        config: FredClientConfig,
        *,
        client: SyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        normalized_base_url = config.base_url.rstrip("/") + "/"
        self._client = client or httpx.Client(
            base_url=normalized_base_url,
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def probe(self, endpoint: str, *, params: QueryPairs) -> int | None:
        """Issue a throwaway GET; only transport failures raise.

        Returns the HTTP status of the probe response for diagnostics.
        """

        if self._closed:
            raise FredTransportError("transport is already closed")
        normalized_endpoint = self._normalize_endpoint(endpoint)
        try:
            response = self._client.get(normalized_endpoint, params=params)
        except Exception as exc:
            logger.error(
                "probe failed endpoint=%s error=%s",
                normalized_endpoint,
                exc.__class__.__name__,
            )
            raise FredTransportError(_describe(exc), cause="network") from exc
        http_status = getattr(response, "status_code", None)
        logger.debug("probe response endpoint=%s http_status=%s", normalized_endpoint, http_status)
        return http_status

    def request(self, endpoint: str, *, params: QueryPairs) -> dict[str, object]:
        if self._closed:
            raise FredTransportError("transport is already closed")

        normalized_endpoint = self._normalize_endpoint(endpoint)
        logger.debug("request start endpoint=%s", normalized_endpoint)

        try:
            response = self._client.get(normalized_endpoint, params=params)
        except Exception as exc:
            logger.error(
                "request network error endpoint=%s error=%s",
                normalized_endpoint,
                exc.__class__.__name__,
            )
            raise FredTransportError(_describe(exc), cause="network") from exc

        http_status = getattr(response, "status_code", None)
        logger.debug(
            "response received endpoint=%s http_status=%s",
            normalized_endpoint,
            http_status,
        )
        try:
            payload = parse_json_payload(response, http_status=http_status)
            remote_error = classify_payload_outcome(payload, http_status=http_status)
        except FredDecodeError:
            logger.error(
                "response decode error endpoint=%s http_status=%s",
                normalized_endpoint,
                http_status,
            )
            raise

        if remote_error is not None:
            logger.warning(
                "request rejected endpoint=%s http_status=%s error_code=%s",
                normalized_endpoint,
                http_status,
                remote_error.error_code,
            )
            raise remote_error

        logger.info("request success endpoint=%s", normalized_endpoint)
        return payload

    @staticmethod
    def _normalize_endpoint(endpoint: str) -> str:
        return endpoint.lstrip("/")


__all__ = [
    "QueryPairs",
    "SyncTransport",
    "build_default_headers",
    "build_default_timeout",
]
