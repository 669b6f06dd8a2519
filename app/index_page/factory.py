"""
Factory for creating index page module.
"""
from content_service import ContentIndex
from .services import ArticleListing
from .routes import create_index_routes


def create_index_page_module(index: ContentIndex, per_page: int = 5) -> dict:
    """Create index page module with services and routes.

    Args:
        index: Pre-built content index shared with the other modules
        per_page: Default number of articles per listing page

    Returns:
        Dictionary containing the service and blueprint
    """
    article_listing = ArticleListing(index, per_page=per_page)
    blueprint = create_index_routes(article_listing)

    return {
        "listing": article_listing,
        "blueprint": blueprint,
    }
