"""Category endpoint family."""

from .models import CategoriesResponse, Category

__all__ = [
    "Category",
    "CategoriesResponse",
]
