"""
Content index construction.

The index is built once from the full set of article records and is
read-only afterwards, so any number of readers can share it without locking.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from .exceptions import DuplicateSlugError, MalformedArticleError
from .models import Article, TagNormalizer

logger = logging.getLogger(__name__)

ArticleInput = Union[Article, Mapping[str, Any]]


class ContentIndex:
    """Immutable, ordered view over the article collection and its tags."""

    def __init__(
        self,
        articles: Iterable[Article],
        tag_index: Mapping[str, Iterable[str]],
        display_names: Mapping[str, str],
        tag_normalizer: TagNormalizer,
    ):
        self._articles: Tuple[Article, ...] = tuple(articles)
        self._by_slug = MappingProxyType({a.slug: a for a in self._articles})
        self._positions = MappingProxyType({a.slug: i for i, a in enumerate(self._articles)})
        self._tag_index = MappingProxyType({k: tuple(v) for k, v in tag_index.items()})
        self._display_names = MappingProxyType(dict(display_names))
        self.tag_normalizer = tag_normalizer

    def __len__(self) -> int:
        return len(self._articles)

    def __iter__(self) -> Iterator[Article]:
        return iter(self._articles)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    @property
    def articles(self) -> Tuple[Article, ...]:
        """All articles, newest first, ties broken by slug."""
        return self._articles

    @property
    def tag_index(self) -> Mapping[str, Tuple[str, ...]]:
        """Normalized tag key -> ordered slugs carrying that tag."""
        return self._tag_index

    @property
    def tag_counts(self) -> Dict[str, int]:
        """Display name -> number of articles carrying the tag."""
        return {self._display_names[key]: len(slugs) for key, slugs in self._tag_index.items()}

    def get(self, slug: str) -> Optional[Article]:
        return self._by_slug.get(slug)

    def normalize_tag(self, tag: Any) -> str:
        return self.tag_normalizer.key(tag)

    def display_name(self, tag: Any) -> Optional[str]:
        """Display casing for a tag, or None when no article carries it."""
        return self._display_names.get(self.normalize_tag(tag))

    def slugs_for_tag(self, tag: Any) -> Tuple[str, ...]:
        return self._tag_index.get(self.normalize_tag(tag), ())

    def articles_for_tag(self, tag: Any) -> List[Article]:
        """Articles carrying a tag in listing order; unknown tags give []."""
        return [self._by_slug[slug] for slug in self.slugs_for_tag(tag)]

    def tag_cloud(self, query: Optional[str] = None) -> List[Dict[str, Any]]:
        """Get sorted tag cloud, optionally limited to tags containing query."""
        needle = (query or "").strip().lower()
        items = [
            {"name": self._display_names[key], "key": key, "count": len(slugs)}
            for key, slugs in self._tag_index.items()
            if not needle or needle in key
        ]
        return sorted(items, key=lambda item: (-item["count"], item["key"]))

    def adjacent(self, slug: str) -> Tuple[Optional[Article], Optional[Article]]:
        """Return the (newer, older) neighbours of an article in listing order."""
        position = self._positions.get(slug)
        if position is None:
            return None, None
        newer = self._articles[position - 1] if position > 0 else None
        older = self._articles[position + 1] if position + 1 < len(self._articles) else None
        return newer, older


def _source_of(record: ArticleInput, position: int) -> str:
    if isinstance(record, Article):
        return record.body or record.slug
    if isinstance(record, Mapping):
        return str(record.get("body") or record.get("slug") or f"<record #{position}>")
    return f"<record #{position}>"


def _describe_errors(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'record'}: {err['msg']}"
        for err in error.errors()
    )


def validate_article(record: ArticleInput, position: int = 0) -> Article:
    """Validate a raw record into an Article.

    Raises:
        MalformedArticleError: If the slug is missing or empty, the date is
            missing or unparseable, or the record is not a mapping.
    """
    if isinstance(record, Article):
        return record
    source = _source_of(record, position)
    if not isinstance(record, Mapping):
        raise MalformedArticleError(source, f"expected a mapping, got {type(record).__name__}")
    try:
        return Article.model_validate(dict(record))
    except ValidationError as e:
        raise MalformedArticleError(source, _describe_errors(e))


def build_content_index(
    records: Iterable[ArticleInput],
    tag_normalizer: Optional[TagNormalizer] = None,
) -> ContentIndex:
    """Build the content index from the full set of article records.

    Articles are ordered by publication date descending with slug ascending
    as tie-break, independent of the input order. Each normalized tag maps to
    the slugs carrying it in that same order.

    Raises:
        MalformedArticleError: If any record is missing a slug or date.
        DuplicateSlugError: If two records share a slug.
    """
    tag_normalizer = tag_normalizer or TagNormalizer()

    articles: List[Article] = []
    sources: Dict[str, str] = {}
    for position, record in enumerate(records):
        try:
            article = validate_article(record, position)
        except MalformedArticleError as e:
            logger.error("Index build halted: %s", e)
            raise
        source = _source_of(record, position)
        if article.slug in sources:
            error = DuplicateSlugError(article.slug, [sources[article.slug], source])
            logger.error("Index build halted: %s", error)
            raise error
        sources[article.slug] = source
        articles.append(article)

    # Slug sort first so the stable date sort breaks ties by slug
    articles.sort(key=lambda a: a.slug)
    articles.sort(key=lambda a: a.date, reverse=True)

    tag_index: Dict[str, List[str]] = {}
    display_names: Dict[str, str] = {}
    for article in articles:
        for tag in article.tags:
            key = tag_normalizer.key(tag)
            display_names.setdefault(key, tag_normalizer.display_name(tag))
            tag_index.setdefault(key, []).append(article.slug)

    logger.info("Built content index: %d articles, %d tags", len(articles), len(tag_index))
    return ContentIndex(articles, tag_index, display_names, tag_normalizer)
