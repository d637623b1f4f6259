"""Core response models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .payload import optional_int, optional_text, require_int, require_text


@dataclass(slots=True, frozen=True)
class ResultEnvelope:
    """Realtime window and pagination metadata shared by list responses."""

    realtime_start: str | None = None
    realtime_end: str | None = None
    order_by: str | None = None
    sort_order: str | None = None
    count: int | None = None
    offset: int | None = None
    limit: int | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "ResultEnvelope":
        return cls(
            realtime_start=optional_text(payload, "realtime_start"),
            realtime_end=optional_text(payload, "realtime_end"),
            order_by=optional_text(payload, "order_by"),
            sort_order=optional_text(payload, "sort_order"),
            count=optional_int(payload, "count"),
            offset=optional_int(payload, "offset"),
            limit=optional_int(payload, "limit"),
        )


@dataclass(slots=True, frozen=True)
class ErrorEnvelope:
    error_code: int
    error_message: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "ErrorEnvelope":
        return cls(
            error_code=require_int(payload, "error_code"),
            error_message=require_text(payload, "error_message"),
        )


__all__ = [
    "ResultEnvelope",
    "ErrorEnvelope",
]
