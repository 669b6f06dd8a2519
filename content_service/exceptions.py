"""
Content errors raised while loading articles and building the index.

All of these are build-time data-integrity problems: they halt index
construction and are reported at startup.
"""

from typing import Iterable


class ContentError(Exception):
    """Base class for content configuration errors."""


class MalformedArticleError(ContentError):
    """Raised when an article record is missing a slug or a parseable date."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Malformed article record {source}: {reason}")


class DuplicateSlugError(ContentError):
    """Raised when two article records resolve to the same slug."""

    def __init__(self, slug: str, sources: Iterable[str]):
        self.slug = slug
        self.sources = list(sources)
        super().__init__(
            f"Duplicate article slug '{slug}' in: {', '.join(self.sources)}"
        )
