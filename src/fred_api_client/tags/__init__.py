"""Tag endpoint family."""

from .models import Tag, TagsResponse
from .params import RelatedTagsParams, TagGroupId, TagOrderBy, TagsParams

__all__ = [
    "Tag",
    "TagsResponse",
    "TagGroupId",
    "TagOrderBy",
    "TagsParams",
    "RelatedTagsParams",
]
