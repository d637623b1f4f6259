"""Transport, builder and error primitives shared by all endpoint families."""

from .errors import (
    FredApiError,
    FredClientClosedError,
    FredClientInitError,
    FredDecodeError,
    FredRemoteError,
    FredTransportError,
    FredValidationError,
)
from .models import ErrorEnvelope, ResultEnvelope
from .params import QueryParams, RealtimeParams, SortOrder

__all__ = [
    "FredApiError",
    "FredClientClosedError",
    "FredClientInitError",
    "FredDecodeError",
    "FredRemoteError",
    "FredTransportError",
    "FredValidationError",
    "ErrorEnvelope",
    "ResultEnvelope",
    "QueryParams",
    "RealtimeParams",
    "SortOrder",
]
