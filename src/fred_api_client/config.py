"""Client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = DEFAULT_TIMEOUT_SECONDS
    timeout_read_seconds: float = DEFAULT_TIMEOUT_SECONDS
    timeout_write_seconds: float = DEFAULT_TIMEOUT_SECONDS
    timeout_pool_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class FredClientConfig:
    """Runtime configuration for FRED client."""

    base_url: str = "https://api.stlouisfed.org/fred"
    user_agent: str = "fred-api-client/0.1.0"
    api_key_env: str = "FRED_API_KEY"
    probe_on_init: bool = True
    probe_category_id: int = 125

    transport: TransportConfig = field(default_factory=TransportConfig)

    def read_api_key(self) -> str:
        """Return the key from the configured environment variable, or ``""``."""

        return os.environ.get(self.api_key_env, "")

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.api_key_env:
            raise ValueError("api_key_env must not be empty")
        if not isinstance(self.probe_on_init, bool):
            raise ValueError("probe_on_init must be bool")
        if self.probe_category_id < 0:
            raise ValueError("probe_category_id must be >= 0")
        self.transport.validate()


__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "TransportConfig",
    "FredClientConfig",
]
