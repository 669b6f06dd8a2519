"""
Models package for blog content.

This package contains the Pydantic models and tag rules shared by the
content loader, the index builder and the search service.
"""

from .article import (
    Article,
    SearchQuery,
    parse_publication_date,
)

from .tags import (
    ALL_TAGS,
    TagNormalizer,
    clean_tag,
    tag_key,
)

__all__ = [
    # Article models
    "Article",
    "SearchQuery",
    "parse_publication_date",

    # Tag rules
    "ALL_TAGS",
    "TagNormalizer",
    "clean_tag",
    "tag_key",
]
