"""
Index page routes for article listings, tag pages and article metadata.
"""
from typing import Dict, Mapping

from flask import Blueprint, abort, jsonify, request

from .models import Pagination
from .services import ArticleListing


def parse_pagination_args(args: Mapping[str, str], default_per_page: int) -> Dict[str, int]:
    """Extract and validate pagination parameters from request args."""
    try:
        page = max(1, int(args.get("page", 1)))
    except (TypeError, ValueError):
        page = 1
    try:
        per_page = int(args.get("per_page", default_per_page))
    except (TypeError, ValueError):
        per_page = default_per_page
    return {
        "page": page,
        "per_page": max(1, min(per_page, Pagination.MAX_PER_PAGE)),
    }


def create_index_routes(article_listing: ArticleListing) -> Blueprint:
    """Create index page routes."""
    bp = Blueprint('index_page', __name__)

    def _pagination_params() -> Dict[str, int]:
        return parse_pagination_args(request.args, article_listing.per_page)

    @bp.route("/", methods=["GET"])
    def index():
        """Main listing, newest first."""
        return jsonify(article_listing.list_page(**_pagination_params()))

    @bp.route("/tags", methods=["GET"])
    def tags():
        """Tag cloud with article counts."""
        query = (request.args.get("q") or "").strip()
        return jsonify({"tags": article_listing.tags(query or None)})

    @bp.route("/tags/<path:tag>", methods=["GET"])
    def tag_listing(tag):
        """Listing restricted to one tag. Unknown tags give an empty page."""
        return jsonify(article_listing.tag_page(tag, **_pagination_params()))

    @bp.route("/blog/<path:slug>", methods=["GET"])
    def article(slug):
        """Article metadata with newer/older navigation links."""
        detail = article_listing.article_detail(slug.strip("/"))
        if detail is None:
            abort(404)
        return jsonify(detail)

    return bp
