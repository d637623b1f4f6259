"""Series domain and response models."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.models import ResultEnvelope

MISSING_VALUE = "."


@dataclass(slots=True, frozen=True)
class Series:
    id: str
    realtime_start: str
    realtime_end: str
    title: str
    observation_start: str
    observation_end: str
    frequency: str
    frequency_short: str
    units: str
    units_short: str
    seasonal_adjustment: str
    seasonal_adjustment_short: str
    last_updated: str
    popularity: int
    group_popularity: int | None = None
    notes: str | None = None


@dataclass(slots=True, frozen=True)
class Observation:
    realtime_start: str
    realtime_end: str
    date: str
    value: str

    @property
    def numeric_value(self) -> float | None:
        """``value`` as a float; ``None`` for FRED's ``"."`` missing marker."""

        if self.value == MISSING_VALUE:
            return None
        return float(self.value)

    def __str__(self) -> str:
        return f"({self.date}: {self.value})"


@dataclass(slots=True, frozen=True)
class SeriesResponse:
    envelope: ResultEnvelope
    seriess: tuple[Series, ...] | list[Series]

    def __post_init__(self) -> None:
        if isinstance(self.seriess, tuple):
            return
        object.__setattr__(self, "seriess", tuple(self.seriess))


@dataclass(slots=True, frozen=True)
class ObservationsResponse:
    envelope: ResultEnvelope
    observation_start: str
    observation_end: str
    units: str
    output_type: int
    file_type: str
    observations: tuple[Observation, ...] | list[Observation]

    def __post_init__(self) -> None:
        if isinstance(self.observations, tuple):
            return
        object.__setattr__(self, "observations", tuple(self.observations))

    def __str__(self) -> str:
        return "".join(f"{item}\n" for item in self.observations)


@dataclass(slots=True, frozen=True)
class SeriesUpdatesResponse:
    envelope: ResultEnvelope
    filter_variable: str
    filter_value: str
    seriess: tuple[Series, ...] | list[Series]

    def __post_init__(self) -> None:
        if isinstance(self.seriess, tuple):
            return
        object.__setattr__(self, "seriess", tuple(self.seriess))


@dataclass(slots=True, frozen=True)
class VintageDatesResponse:
    envelope: ResultEnvelope
    vintage_dates: tuple[str, ...] | list[str]

    def __post_init__(self) -> None:
        if isinstance(self.vintage_dates, tuple):
            return
        object.__setattr__(self, "vintage_dates", tuple(self.vintage_dates))


__all__ = [
    "MISSING_VALUE",
    "Series",
    "Observation",
    "SeriesResponse",
    "ObservationsResponse",
    "SeriesUpdatesResponse",
    "VintageDatesResponse",
]
