# Content service package for blog article loading and indexing

from .exceptions import ContentError, MalformedArticleError, DuplicateSlugError
from .models import Article, SearchQuery, TagNormalizer, ALL_TAGS
from .content_loader import ContentLoader
from .index_builder import ContentIndex, build_content_index, validate_article
from .markdown_processor import (
    split_front_matter,
    extract_title,
    extract_excerpt,
    markdown_to_text,
)
from .logging_config import (
    setup_logging,
    stop_logging,
    ThreadSafeLoggingConfig,
)

__all__ = [
    "ContentError",
    "MalformedArticleError",
    "DuplicateSlugError",
    "Article",
    "SearchQuery",
    "TagNormalizer",
    "ALL_TAGS",
    "ContentLoader",
    "ContentIndex",
    "build_content_index",
    "validate_article",
    "split_front_matter",
    "extract_title",
    "extract_excerpt",
    "markdown_to_text",
    "setup_logging",
    "stop_logging",
    "ThreadSafeLoggingConfig",
]
