"""Public client entrypoint."""

from __future__ import annotations

import logging
from types import TracebackType

from .category.service import CategoryService
from .client_shared import resolve_api_key, validate_client_config
from .config import FredClientConfig
from .core.errors import FredClientClosedError, FredClientInitError, FredTransportError
from .core.executor import RequestExecutor, Transport
from .core.transport import SyncTransport
from .release.service import ReleaseService
from .series.service import SeriesService
from .source.service import SourceService
from .tags.service import TagsService

logger = logging.getLogger("fred_api_client")


class FredClient:
    """Public FRED API client.

    The client holds one HTTP session for its whole lifetime. Construction
    resolves the API key (explicit argument first, then the environment
    variable named by ``config.api_key_env``) and, unless disabled, issues a
    single probe request to confirm the service is reachable. The probe's
    HTTP status and body are ignored; only a failure to complete the exchange
    aborts construction with :class:`FredClientInitError`.

    Endpoint families are plain service attributes; once the client is closed
    every endpoint call raises :class:`FredClientClosedError`.
    """

    def __init__(
        self,
        config: FredClientConfig | None = None,
        *,
        api_key: str | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config or FredClientConfig()
        validate_client_config(self._config)

        self._owns_transport = transport is None
        if transport is None:
            try:
                transport = SyncTransport(self._config)
            except Exception as exc:
                raise FredClientInitError(
                    f"failed to create HTTP session: {exc}",
                    cause="session",
                ) from exc
        self._transport = transport
        self._executor = RequestExecutor(
            self._transport,
            api_key=resolve_api_key(self._config, api_key),
        )

        if self._config.probe_on_init:
            self._probe()

        self.series: SeriesService = SeriesService(self._executor)
        self.category: CategoryService = CategoryService(self._executor)
        self.release: ReleaseService = ReleaseService(self._executor)
        self.source: SourceService = SourceService(self._executor)
        self.tags: TagsService = TagsService(self._executor)

    def _probe(self) -> None:
        try:
            http_status = self._executor.probe(category_id=self._config.probe_category_id)
        except FredTransportError as exc:
            if self._owns_transport:
                self._transport.close()
            raise FredClientInitError(
                f"failed to reach {self._config.base_url}: {exc}",
                cause="probe",
            ) from exc
        logger.info("client ready base_url=%s probe_status=%s", self._config.base_url, http_status)

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def api_key(self) -> str:
        return self._executor.api_key

    def set_api_key(self, key: str) -> None:
        """Replace the key sent with every subsequent request."""

        self._executor.api_key = key

    @property
    def closed(self) -> bool:
        return self._executor.closed

    def _ensure_open(self) -> None:
        if self.closed:
            raise FredClientClosedError("FredClient is already closed")

    def close(self) -> None:
        if self.closed:
            return
        self._executor.mark_closed()
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> "FredClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "FredClient",
]
