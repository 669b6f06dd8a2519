"""
Flask application factory for the blog content service.

The content index is built once here and handed to every module explicitly.
"""
import logging
from pathlib import Path
from typing import Optional

from flask import Flask, jsonify
from werkzeug.middleware.proxy_fix import ProxyFix

from config_manager import ConfigManager
from content_service import ContentIndex, ContentLoader, TagNormalizer, build_content_index
from app.index_page.factory import create_index_page_module
from app.search.factory import create_search_module

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).parent.parent


def resolve_content_dir(content_dir: str) -> Path:
    """Resolve the configured content dir; relative paths are project-relative."""
    path = Path(content_dir)
    if not path.is_absolute():
        path = BASE_DIR / path
    return path


def build_index(config_manager: ConfigManager) -> ContentIndex:
    """Load every article and build the content index.

    Raises:
        ContentError: If any article record is malformed or a slug repeats.
    """
    content_config = config_manager.get_content_config()
    tags_config = config_manager.get_tags_config()

    loader = ContentLoader(
        resolve_content_dir(content_config.content_dir),
        include_drafts=content_config.include_drafts,
        summary_length=content_config.summary_length,
    )
    records = loader.load_records()
    return build_content_index(records, TagNormalizer(tags_config.display_casing))


def create_app(config_manager: Optional[ConfigManager] = None, index: Optional[ContentIndex] = None) -> Flask:
    """Create the Flask app with its listing and search blueprints."""
    config_manager = config_manager or ConfigManager()
    content_config = config_manager.get_content_config()

    if index is None:
        index = build_index(config_manager)

    app = Flask(__name__)
    app.wsgi_app = ProxyFix(
            app.wsgi_app,
            x_proto = 1,     # trust 1 hop for X-Forwarded-Proto
            x_host  = 1,     # trust 1 hop for X-Forwarded-Host
            x_prefix= 1)     # <-- pay attention to X-Forwarded-Prefix

    index_page_module = create_index_page_module(index, per_page=content_config.per_page)
    search_module = create_search_module(index, index_page_module["listing"])

    app.register_blueprint(index_page_module["blueprint"])
    app.register_blueprint(search_module["blueprint"])

    app.extensions["content_index"] = index
    app.extensions["search_service"] = search_module["service"]

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"error": "Not found"}), 404

    logger.info("Blog app ready with %d articles", len(index))
    return app
