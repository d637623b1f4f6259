"""Release response models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..core.models import ResultEnvelope


@dataclass(slots=True, frozen=True)
class Release:
    id: int
    realtime_start: str
    realtime_end: str
    name: str
    press_release: bool
    link: str | None = None
    notes: str | None = None


@dataclass(slots=True, frozen=True)
class ReleaseDate:
    release_id: int
    date: str
    release_name: str | None = None

    def __str__(self) -> str:
        return f"Release Date {self.release_id}: {self.date}"


@dataclass(slots=True, frozen=True)
class ReleaseTableElement:
    element_id: int
    release_id: int
    element_type: str
    name: str
    level: str
    series_id: str | None = None
    parent_id: int | None = None
    line: str | None = None
    children: tuple["ReleaseTableElement", ...] | list["ReleaseTableElement"] = ()

    def __post_init__(self) -> None:
        if isinstance(self.children, tuple):
            return
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(slots=True, frozen=True)
class ReleasesResponse:
    envelope: ResultEnvelope
    releases: tuple[Release, ...] | list[Release]

    def __post_init__(self) -> None:
        if isinstance(self.releases, tuple):
            return
        object.__setattr__(self, "releases", tuple(self.releases))


@dataclass(slots=True, frozen=True)
class ReleaseDatesResponse:
    envelope: ResultEnvelope
    release_dates: tuple[ReleaseDate, ...] | list[ReleaseDate]

    def __post_init__(self) -> None:
        if isinstance(self.release_dates, tuple):
            return
        object.__setattr__(self, "release_dates", tuple(self.release_dates))

    def __str__(self) -> str:
        return "".join(f"{item}\n" for item in self.release_dates)


@dataclass(slots=True, frozen=True)
class ReleaseTablesResponse:
    release_id: str
    elements: Mapping[str, ReleaseTableElement]
    name: str | None = None
    element_id: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.elements, MappingProxyType):
            return
        object.__setattr__(self, "elements", MappingProxyType(dict(self.elements)))


__all__ = [
    "Release",
    "ReleaseDate",
    "ReleaseTableElement",
    "ReleasesResponse",
    "ReleaseDatesResponse",
    "ReleaseTablesResponse",
]
