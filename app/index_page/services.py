"""
Index page services for article listings and tag pages.
"""
from typing import Any, Dict, List, Optional, Sequence

from content_service import Article, ContentIndex
from .models import Pagination


class ArticleListing:
    """Service for turning ordered articles into paginated listing payloads."""

    def __init__(self, index: ContentIndex, per_page: int = 5):
        self.index = index
        self.per_page = per_page

    def serialize(self, article: Article) -> Dict[str, Any]:
        """Convert an article into the listing payload shape."""
        item = article.to_dict()
        item["tags"] = [self.index.display_name(tag) or tag for tag in article.tags]
        item["url"] = f"/blog/{article.slug}"
        return item

    def paginate(self, articles: Sequence[Article], page: int = 1, per_page: Optional[int] = None) -> Dict[str, Any]:
        """Slice an ordered article list into one page."""
        pagination = Pagination(len(articles), page, per_page or self.per_page)
        return {
            "articles": [self.serialize(a) for a in pagination.get_page_items(list(articles))],
            **pagination.to_dict(),
        }

    def list_page(self, page: int = 1, per_page: Optional[int] = None) -> Dict[str, Any]:
        """Get one page of the full listing."""
        return self.paginate(self.index.articles, page, per_page)

    def tag_page(self, tag: str, page: int = 1, per_page: Optional[int] = None) -> Dict[str, Any]:
        """Get one page of the listing for a single tag."""
        payload = self.paginate(self.index.articles_for_tag(tag), page, per_page)
        payload["tag"] = self.index.display_name(tag) or self.index.normalize_tag(tag)
        payload["tag_key"] = self.index.normalize_tag(tag)
        return payload

    def article_detail(self, slug: str) -> Optional[Dict[str, Any]]:
        """Get an article's metadata with its newer/older neighbours."""
        article = self.index.get(slug)
        if article is None:
            return None
        newer, older = self.index.adjacent(slug)
        item = self.serialize(article)
        item["newer"] = self._link(newer)
        item["older"] = self._link(older)
        return item

    def tags(self, query: Optional[str] = None) -> List[Dict[str, Any]]:
        """Get the tag cloud for the navigation filter controls."""
        return self.index.tag_cloud(query)

    @staticmethod
    def _link(article: Optional[Article]) -> Optional[Dict[str, str]]:
        if article is None:
            return None
        return {"slug": article.slug, "title": article.title, "url": f"/blog/{article.slug}"}
