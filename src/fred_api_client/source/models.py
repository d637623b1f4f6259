"""Source response models."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.models import ResultEnvelope


@dataclass(slots=True, frozen=True)
class Source:
    id: int
    realtime_start: str
    realtime_end: str
    name: str
    link: str | None = None
    notes: str | None = None


@dataclass(slots=True, frozen=True)
class SourcesResponse:
    envelope: ResultEnvelope
    sources: tuple[Source, ...] | list[Source]

    def __post_init__(self) -> None:
        if isinstance(self.sources, tuple):
            return
        object.__setattr__(self, "sources", tuple(self.sources))


__all__ = [
    "Source",
    "SourcesResponse",
]
