"""Shared helpers for client bootstrap."""

from __future__ import annotations

import logging

from .config import FredClientConfig
from .core.errors import FredValidationError

logger = logging.getLogger("fred_api_client")


def validate_client_config(config: FredClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise FredValidationError(str(exc)) from exc


def resolve_api_key(config: FredClientConfig, api_key: str | None) -> str:
    """Explicit key wins; otherwise read the configured environment variable."""

    if api_key is not None:
        resolved = api_key
    else:
        resolved = config.read_api_key()
    if not resolved:
        logger.warning(
            "no API key configured; set %s or call set_api_key() before issuing requests",
            config.api_key_env,
        )
    return resolved


__all__ = [
    "validate_client_config",
    "resolve_api_key",
]
