"""Release endpoint family."""

from .models import (
    Release,
    ReleaseDate,
    ReleaseDatesResponse,
    ReleasesResponse,
    ReleaseTableElement,
    ReleaseTablesResponse,
)
from .params import (
    ReleaseDateOrderBy,
    ReleaseDatesParams,
    ReleaseOrderBy,
    ReleasesDatesParams,
    ReleasesParams,
    ReleaseTablesParams,
)

__all__ = [
    "Release",
    "ReleaseDate",
    "ReleaseTableElement",
    "ReleasesResponse",
    "ReleaseDatesResponse",
    "ReleaseTablesResponse",
    "ReleaseOrderBy",
    "ReleaseDateOrderBy",
    "ReleasesParams",
    "ReleasesDatesParams",
    "ReleaseDatesParams",
    "ReleaseTablesParams",
]
