"""Response body decoding and error-envelope dispatch."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from .errors import FredDecodeError, FredRemoteError
from .models import ErrorEnvelope


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> dict[str, object]:
    """Decode the response body once into a JSON object."""

    try:
        payload = response.json()
    except ValueError as exc:
        raise FredDecodeError(str(exc), http_status=http_status) from exc

    if not isinstance(payload, dict):
        raise FredDecodeError(
            "response JSON root must be an object",
            http_status=http_status,
        )
    return payload


def is_error_payload(payload: Mapping[str, object]) -> bool:
    return "error_code" in payload


def classify_payload_outcome(
    payload: Mapping[str, object],
    *,
    http_status: int | None,
) -> FredRemoteError | None:
    """Return the remote error carried by ``payload``, or ``None`` for a success body.

    A body whose ``error_code`` does not form a well-formed envelope is left to
    the endpoint parser, so a decode failure describes the expected success
    shape rather than the envelope.
    """

    if not is_error_payload(payload):
        return None
    try:
        envelope = ErrorEnvelope.from_payload(payload)
    except FredDecodeError:
        return None
    return FredRemoteError(
        envelope.error_code,
        envelope.error_message,
        http_status=http_status,
    )


__all__ = [
    "JsonPayloadResponse",
    "parse_json_payload",
    "is_error_payload",
    "classify_payload_outcome",
]
