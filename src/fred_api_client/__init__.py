"""Public package exports for FRED API client."""

from .client import FredClient
from .config import FredClientConfig, TransportConfig
from .core.errors import (
    FredApiError,
    FredClientClosedError,
    FredClientInitError,
    FredDecodeError,
    FredRemoteError,
    FredTransportError,
    FredValidationError,
)
from .core.params import QueryParams, RealtimeParams, SortOrder

__all__ = [
    "FredClient",
    "FredClientConfig",
    "TransportConfig",
    "FredApiError",
    "FredClientInitError",
    "FredClientClosedError",
    "FredValidationError",
    "FredTransportError",
    "FredDecodeError",
    "FredRemoteError",
    "QueryParams",
    "RealtimeParams",
    "SortOrder",
]
