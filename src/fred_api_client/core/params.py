"""Query parameter builders shared by every endpoint family.

A builder is an append log of ``(key, value)`` pairs. Setters append one pair
and return the builder for chaining; repeatable fields (tag names, vintage
dates) collect into separate accumulators that are joined into a single pair
when :meth:`ParamsBuilder.build` runs. ``build`` is one-shot: the builder is
spent afterwards and any further use raises :class:`FredValidationError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeVar
from urllib.parse import quote, urlencode

from .errors import FredValidationError

_B = TypeVar("_B", bound="ParamsBuilder")

# FRED joins repeated values into one parameter with these separators.
_SAFE_CHARS = ";,"

DEFAULT_LIMIT_CEILING = 1000


class SortOrder(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(slots=True, frozen=True)
class QueryParams:
    """Finalized builder output."""

    pairs: tuple[tuple[str, str], ...] = ()

    @property
    def fragment(self) -> str:
        """Render as ``&key=value...`` suitable for appending to a request URL."""

        if not self.pairs:
            return ""
        return "&" + urlencode(self.pairs, safe=_SAFE_CHARS, quote_via=quote)

    def __str__(self) -> str:
        return self.fragment


class ParamsBuilder:
    """Base accumulator for optional request parameters."""

    list_params: ClassVar[tuple[tuple[str, str], ...]] = ()
    requires_tag_names: ClassVar[bool] = False
    limit_ceiling: ClassVar[int] = DEFAULT_LIMIT_CEILING

    def __init__(self) -> None:
        self._pairs: list[tuple[str, str]] = []
        self._lists: dict[str, list[str]] = {key: [] for key, _ in self.list_params}
        self._built = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pairs={self._pairs!r}, lists={self._lists!r})"

    def _ensure_not_built(self) -> None:
        if self._built:
            raise FredValidationError(f"{type(self).__name__} has already been built")

    def _append(self: _B, key: str, value: object) -> _B:
        self._ensure_not_built()
        self._pairs.append((key, str(value)))
        return self

    def _append_choice(
        self: _B,
        key: str,
        choice: Enum,
        enum_type: type[Enum],
        *,
        default: Enum | None = None,
    ) -> _B:
        if not isinstance(choice, enum_type):
            raise TypeError(f"{key} must be a {enum_type.__name__} member")
        self._ensure_not_built()
        # The API default is sent by omission.
        if choice is default:
            return self
        return self._append(key, choice.value)

    def _append_item(self: _B, key: str, value: str) -> _B:
        self._ensure_not_built()
        self._lists[key].append(value)
        return self

    def build(self) -> QueryParams:
        """Finalize into :class:`QueryParams`; the builder cannot be reused."""

        self._ensure_not_built()
        self._built = True
        if self.requires_tag_names and not self._lists.get("tag_names"):
            raise FredValidationError(
                f"At least one tag must be specified using tag_name() before building "
                f"{type(self).__name__}"
            )
        pairs = list(self._pairs)
        for key, separator in self.list_params:
            values = self._lists[key]
            if values:
                pairs.append((key, separator.join(values)))
        return QueryParams(tuple(pairs))


class RealtimeMixin(ParamsBuilder):
    def realtime_start(self: _B, start_date: str) -> _B:
        return self._append("realtime_start", start_date)

    def realtime_end(self: _B, end_date: str) -> _B:
        return self._append("realtime_end", end_date)


class PagingMixin(ParamsBuilder):
    def limit(self: _B, num_results: int) -> _B:
        """Maximum number of results; values above the endpoint ceiling are clamped."""

        return self._append("limit", min(num_results, self.limit_ceiling))

    def offset(self: _B, ofs: int) -> _B:
        return self._append("offset", ofs)


class SortMixin(ParamsBuilder):
    default_sort_order: ClassVar[SortOrder] = SortOrder.ASCENDING

    def sort_order(self: _B, order: SortOrder) -> _B:
        return self._append_choice(
            "sort_order", order, SortOrder, default=self.default_sort_order
        )


class TagNamesMixin(ParamsBuilder):
    list_params = (("tag_names", ";"),)

    def tag_name(self: _B, tag: str) -> _B:
        """Match ``tag``; repeated calls are combined with AND."""

        return self._append_item("tag_names", tag)


class TagFilterMixin(TagNamesMixin):
    list_params = (("tag_names", ";"), ("exclude_tag_names", ";"))

    def exclude_tag(self: _B, tag: str) -> _B:
        return self._append_item("exclude_tag_names", tag)


class RealtimeParams(RealtimeMixin):
    """Options for endpoints that only accept a realtime window."""


__all__ = [
    "DEFAULT_LIMIT_CEILING",
    "SortOrder",
    "QueryParams",
    "ParamsBuilder",
    "RealtimeMixin",
    "PagingMixin",
    "SortMixin",
    "TagNamesMixin",
    "TagFilterMixin",
    "RealtimeParams",
]
