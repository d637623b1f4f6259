"""Error types."""

from __future__ import annotations


class FredApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class FredClientInitError(FredApiError):
    """Client could not be constructed."""


class FredClientClosedError(FredApiError):
    """Raised when client is used after close."""


class FredValidationError(FredApiError):
    """Invalid input rejected before any request was sent."""


class FredTransportError(FredApiError):
    """Network/transport-level failure."""


class FredDecodeError(FredApiError):
    """Response body matched neither the expected shape nor the error envelope."""


class FredRemoteError(FredApiError):
    """The API answered with its error envelope."""

    def __init__(
        self,
        error_code: int,
        error_message: str,
        *,
        http_status: int | None = None,
    ) -> None:
        super().__init__(
            f"ERROR {error_code}: {error_message}",
            http_status=http_status,
            cause="remote",
        )
        self.error_code = error_code
        self.error_message = error_message


__all__ = [
    "FredApiError",
    "FredClientInitError",
    "FredClientClosedError",
    "FredValidationError",
    "FredTransportError",
    "FredDecodeError",
    "FredRemoteError",
]
