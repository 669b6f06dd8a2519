"""
Search services for article search and tag filtering.
"""
import logging
from typing import List, Optional, Sequence

from content_service import Article, ContentIndex, SearchQuery

logger = logging.getLogger(__name__)


class SearchService:
    """Service for searching articles by title, summary, and tags.

    Works purely over a pre-built ContentIndex: no caching and no mutation,
    so one instance can serve concurrent requests.
    """

    def __init__(self, index: ContentIndex):
        self.index = index

    def _candidates(self, tag: Optional[str]) -> Sequence[Article]:
        """Restrict to a tag's articles unless the filter is empty or "all"."""
        if tag is None or self.index.tag_normalizer.is_all(tag):
            return self.index.articles
        return self.index.articles_for_tag(tag)

    @staticmethod
    def _matches(article: Article, needle: str) -> bool:
        if needle in article.title.lower() or needle in article.summary.lower():
            return True
        return any(needle in tag.lower() for tag in article.tags)

    def search(self, query: str = "", tag: Optional[str] = None) -> List[Article]:
        """Search articles by query, optionally within one tag.

        Args:
            query: Free-text query, matched as given (no trimming); only ""
                matches every candidate
            tag: Tag filter; None, "" or "all" means no tag restriction

        Returns:
            Matching articles in listing order (newest first). Unknown tags
            give an empty list.
        """
        search_query = SearchQuery(query=query, tag=tag)
        candidates = self._candidates(search_query.tag)
        needle = search_query.needle
        if not needle:
            return list(candidates)
        results = [a for a in candidates if self._matches(a, needle)]
        logger.debug("Search q=%r tag=%r matched %d articles", query, tag, len(results))
        return results

    def suggest(self, query: str, limit: int = 10) -> List[str]:
        """Get search suggestions from tag names and title lead-ins."""
        needle = (query or "").strip().lower()
        if len(needle) < 2:
            return []

        suggestions = set()
        for item in self.index.tag_cloud(needle):
            suggestions.add(item["name"])
        for article in self.index.articles:
            if needle in article.title.lower():
                suggestions.add(" ".join(article.title.split()[:3]))

        return sorted(suggestions, key=str.lower)[:limit]
