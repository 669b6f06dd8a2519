"""
Search subsystem factory for creating search modules.
"""
from content_service import ContentIndex
from app.index_page.services import ArticleListing
from .services import SearchService
from .routes import create_search_routes


def create_search_module(index: ContentIndex, article_listing: ArticleListing) -> dict:
    """Create search module with service and routes."""
    search_service = SearchService(index)
    search_routes = create_search_routes(search_service, article_listing)

    return {
        "service": search_service,
        "blueprint": search_routes
    }
