"""Source endpoint family."""

from .models import Source, SourcesResponse
from .params import SourceOrderBy, SourcesParams

__all__ = [
    "Source",
    "SourcesResponse",
    "SourceOrderBy",
    "SourcesParams",
]
