"""
Search routes for article search functionality.
"""
from flask import Blueprint, request, jsonify

from app.index_page.routes import parse_pagination_args
from app.index_page.services import ArticleListing
from .services import SearchService


def create_search_routes(search_service: SearchService, article_listing: ArticleListing) -> Blueprint:
    """Create search routes."""
    bp = Blueprint('search', __name__, url_prefix='/search')

    @bp.route("/", methods=["GET"])
    def search_articles():
        """Search articles by query and optional tag."""
        query = (request.args.get("q") or "").strip()
        tag = (request.args.get("tag") or "").strip() or None
        pagination = parse_pagination_args(request.args, article_listing.per_page)

        results = search_service.search(query, tag)
        payload = article_listing.paginate(results, **pagination)
        payload.update({
            "query": query,
            "tag": tag or "all",
        })
        return jsonify(payload)

    @bp.route("/suggest", methods=["GET"])
    def search_suggestions():
        """Get search suggestions based on partial query."""
        query = (request.args.get("q") or "").strip()
        return jsonify({"suggestions": search_service.suggest(query)})

    return bp
