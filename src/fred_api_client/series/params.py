"""Request parameter builders for series endpoints."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, TypeVar

from ..core.params import (
    PagingMixin,
    ParamsBuilder,
    RealtimeMixin,
    SortMixin,
    TagFilterMixin,
)
from ..tags.params import RelatedTagsParams, TagOrderBy, TagsParams

_B = TypeVar("_B", bound=ParamsBuilder)

OBSERVATIONS_LIMIT_CEILING = 1_000_000
VINTAGE_DATES_LIMIT_CEILING = 10_000


class Units(Enum):
    LEVELS = "lin"
    CHANGE = "chg"
    CHANGE_FROM_YEAR_AGO = "ch1"
    PERCENT_CHANGE = "pch"
    PERCENT_CHANGE_FROM_YEAR_AGO = "pc1"
    COMPOUNDED_ANNUAL_RATE_OF_CHANGE = "pca"
    CONTINUOUSLY_COMPOUNDED_RATE_OF_CHANGE = "cch"
    CONTINUOUSLY_COMPOUNDED_ANNUAL_RATE_OF_CHANGE = "cca"
    NATURAL_LOG = "log"


class Frequency(Enum):
    DAILY = "d"
    WEEKLY = "w"
    BIWEEKLY = "bw"
    MONTHLY = "m"
    QUARTERLY = "q"
    SEMIANNUAL = "sa"
    ANNUAL = "a"
    WEEKLY_ENDING_FRIDAY = "wef"
    WEEKLY_ENDING_THURSDAY = "weth"
    WEEKLY_ENDING_WEDNESDAY = "wew"
    WEEKLY_ENDING_TUESDAY = "wetu"
    WEEKLY_ENDING_MONDAY = "wem"
    WEEKLY_ENDING_SUNDAY = "wesu"
    WEEKLY_ENDING_SATURDAY = "wesa"
    BIWEEKLY_ENDING_WEDNESDAY = "bwew"
    BIWEEKLY_ENDING_MONDAY = "bwem"


class AggregationMethod(Enum):
    AVERAGE = "avg"
    SUM = "sum"
    END_OF_PERIOD = "eop"


class OutputType(Enum):
    REALTIME_PERIOD = "1"
    VINTAGE_DATE_ALL = "2"
    VINTAGE_DATE_NEW_AND_REVISED = "3"
    INITIAL_RELEASE_ONLY = "4"


class SeriesOrderBy(Enum):
    SERIES_ID = "series_id"
    TITLE = "title"
    UNITS = "units"
    FREQUENCY = "frequency"
    SEASONAL_ADJUSTMENT = "seasonal_adjustment"
    REALTIME_START = "realtime_start"
    REALTIME_END = "realtime_end"
    LAST_UPDATED = "last_updated"
    OBSERVATION_START = "observation_start"
    OBSERVATION_END = "observation_end"
    POPULARITY = "popularity"
    GROUP_POPULARITY = "group_popularity"


class SearchOrderBy(Enum):
    SEARCH_RANK = "search_rank"
    SERIES_ID = "series_id"
    TITLE = "title"
    UNITS = "units"
    FREQUENCY = "frequency"
    SEASONAL_ADJUSTMENT = "seasonal_adjustment"
    REALTIME_START = "realtime_start"
    REALTIME_END = "realtime_end"
    LAST_UPDATED = "last_updated"
    OBSERVATION_START = "observation_start"
    OBSERVATION_END = "observation_end"
    POPULARITY = "popularity"
    GROUP_POPULARITY = "group_popularity"


class SearchType(Enum):
    FULL_TEXT = "full_text"
    SERIES_ID = "series_id"


class FilterVariable(Enum):
    FREQUENCY = "frequency"
    UNITS = "units"
    SEASONAL_ADJUSTMENT = "seasonal_adjustment"


class UpdatesFilter(Enum):
    MACRO = "macro"
    REGIONAL = "regional"
    ALL = "all"


class ObservationsParams(RealtimeMixin, PagingMixin, SortMixin):
    """Options for ``series/observations``."""

    limit_ceiling = OBSERVATIONS_LIMIT_CEILING
    list_params = (("vintage_dates", ","),)

    def observation_start(self: _B, start_date: str) -> _B:
        return self._append("observation_start", start_date)

    def observation_end(self: _B, end_date: str) -> _B:
        return self._append("observation_end", end_date)

    def units(self: _B, units: Units) -> _B:
        return self._append_choice("units", units, Units, default=Units.LEVELS)

    def frequency(self: _B, freq: Frequency) -> _B:
        # Omitting frequency keeps the series' native frequency; no member means that.
        return self._append_choice("frequency", freq, Frequency)

    def aggregation_method(self: _B, method: AggregationMethod) -> _B:
        return self._append_choice(
            "aggregation_method", method, AggregationMethod, default=AggregationMethod.AVERAGE
        )

    def output_type(self: _B, otype: OutputType) -> _B:
        return self._append_choice(
            "output_type", otype, OutputType, default=OutputType.REALTIME_PERIOD
        )

    def vintage_date(self: _B, date: str) -> _B:
        """Add one vintage date; repeated calls are sent comma-separated."""

        return self._append_item("vintage_dates", date)


class SeriesTagsParams(RealtimeMixin, SortMixin):
    """Options for ``series/tags``."""

    def order_by(self: _B, order: TagOrderBy) -> _B:
        return self._append_choice("order_by", order, TagOrderBy, default=TagOrderBy.SERIES_COUNT)


class SeriesUpdatesParams(RealtimeMixin, PagingMixin):
    """Options for ``series/updates``."""

    def filter_value(self: _B, value: UpdatesFilter) -> _B:
        return self._append_choice("filter_value", value, UpdatesFilter, default=UpdatesFilter.ALL)

    def time_range(self: _B, start_time: str, end_time: str) -> _B:
        """Restrict to updates between two ``YYYYMMDDHhmm`` timestamps."""

        self._append("start_time", start_time)
        return self._append("end_time", end_time)


class VintageDatesParams(RealtimeMixin, PagingMixin, SortMixin):
    """Options for ``series/vintagedates``."""

    limit_ceiling = VINTAGE_DATES_LIMIT_CEILING


class _FilterMixin(ParamsBuilder):
    def filter_variable(self: _B, var: FilterVariable) -> _B:
        return self._append_choice("filter_variable", var, FilterVariable)

    def filter_value(self: _B, value: str) -> _B:
        return self._append("filter_value", value)


class SeriesSearchParams(RealtimeMixin, PagingMixin, SortMixin, _FilterMixin, TagFilterMixin):
    """Options for ``series/search``."""

    def search_type(self: _B, stype: SearchType) -> _B:
        return self._append_choice("search_type", stype, SearchType, default=SearchType.FULL_TEXT)

    def order_by(self: _B, order: SearchOrderBy) -> _B:
        return self._append_choice(
            "order_by", order, SearchOrderBy, default=SearchOrderBy.SEARCH_RANK
        )


class SeriesListParams(RealtimeMixin, PagingMixin, SortMixin, _FilterMixin, TagFilterMixin):
    """Options for ``category/series`` and ``release/series``."""

    def order_by(self: _B, order: SeriesOrderBy) -> _B:
        return self._append_choice(
            "order_by", order, SeriesOrderBy, default=SeriesOrderBy.SERIES_ID
        )


class TagsSeriesParams(RealtimeMixin, PagingMixin, SortMixin, TagFilterMixin):
    """Options for ``tags/series``; at least one ``tag_name`` is required."""

    requires_tag_names = True

    def order_by(self: _B, order: SeriesOrderBy) -> _B:
        return self._append_choice(
            "order_by", order, SeriesOrderBy, default=SeriesOrderBy.SERIES_ID
        )


class SeriesSearchTagsParams(TagsParams):
    """Options for ``series/search/tags``."""

    search_text_key: ClassVar[str] = "tag_search_text"


class SeriesSearchRelatedTagsParams(RelatedTagsParams):
    """Options for ``series/search/related_tags``; at least one ``tag_name`` is required."""

    search_text_key: ClassVar[str] = "tag_search_text"


__all__ = [
    "OBSERVATIONS_LIMIT_CEILING",
    "VINTAGE_DATES_LIMIT_CEILING",
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
