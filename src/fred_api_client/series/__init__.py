"""Series endpoint family."""

from .models import (
    MISSING_VALUE,
    Observation,
    ObservationsResponse,
    Series,
    SeriesResponse,
    SeriesUpdatesResponse,
    VintageDatesResponse,
)
from .params import (
    AggregationMethod,
    FilterVariable,
    Frequency,
    ObservationsParams,
    OutputType,
    SearchOrderBy,
    SearchType,
    SeriesListParams,
    SeriesOrderBy,
    SeriesSearchParams,
    SeriesSearchRelatedTagsParams,
    SeriesSearchTagsParams,
    SeriesTagsParams,
    SeriesUpdatesParams,
    TagsSeriesParams,
    Units,
    UpdatesFilter,
    VintageDatesParams,
)

__all__ = [
    "MISSING_VALUE",
    "Series",
    "Observation",
    "SeriesResponse",
    "ObservationsResponse",
    "SeriesUpdatesResponse",
    "VintageDatesResponse",
    "Units",
    "Frequency",
    "AggregationMethod",
    "OutputType",
    "SeriesOrderBy",
    "SearchOrderBy",
    "SearchType",
    "FilterVariable",
    "UpdatesFilter",
    "ObservationsParams",
    "SeriesTagsParams",
    "SeriesUpdatesParams",
    "VintageDatesParams",
    "SeriesSearchParams",
    "SeriesListParams",
    "TagsSeriesParams",
    "SeriesSearchTagsParams",
    "SeriesSearchRelatedTagsParams",
]
