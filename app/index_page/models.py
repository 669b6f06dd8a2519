"""
Index page models for listing pagination.
"""
from typing import Dict, List, Any
import math


class Pagination:
    """Pagination data structure."""

    MAX_PER_PAGE = 100

    def __init__(self, total_items: int, page: int = 1, per_page: int = 10):
        self.total_items = max(0, total_items)
        self.page = max(1, page)
        self.per_page = max(1, min(per_page, self.MAX_PER_PAGE))
        self.total_pages = max(1, math.ceil(self.total_items / self.per_page))

        if self.page > self.total_pages:
            self.page = self.total_pages

        self.start = (self.page - 1) * self.per_page
        self.end = self.start + self.per_page

    def get_page_items(self, items: List[Any]) -> List[Any]:
        """Get items for current page."""
        return list(items[self.start:self.end])

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "page": self.page,
            "per_page": self.per_page,
            "total_pages": self.total_pages,
            "total_items": self.total_items,
            "has_prev": self.has_prev,
            "has_next": self.has_next,
        }
