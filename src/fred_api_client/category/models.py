"""Category response models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Category:
    id: int
    name: str
    parent_id: int
    notes: str | None = None


@dataclass(slots=True, frozen=True)
class CategoriesResponse:
    categories: tuple[Category, ...] | list[Category]

    def __post_init__(self) -> None:
        if isinstance(self.categories, tuple):
            return
        object.__setattr__(self, "categories", tuple(self.categories))


__all__ = [
    "Category",
    "CategoriesResponse",
]
