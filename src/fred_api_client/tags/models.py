"""Tag response models."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.models import ResultEnvelope


@dataclass(slots=True, frozen=True)
class Tag:
    name: str
    group_id: str
    created: str
    popularity: int
    series_count: int
    notes: str | None = None

    def __str__(self) -> str:
        return f"Tag {self.name}"


@dataclass(slots=True, frozen=True)
class TagsResponse:
    envelope: ResultEnvelope
    tags: tuple[Tag, ...] | list[Tag]

    def __post_init__(self) -> None:
        if isinstance(self.tags, tuple):
            return
        object.__setattr__(self, "tags", tuple(self.tags))

    def __str__(self) -> str:
        return "".join(f"{item}\n" for item in self.tags)


__all__ = [
    "Tag",
    "TagsResponse",
]
