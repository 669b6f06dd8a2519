"""
Configuration management for the Techify Blog content service.
Handles loading, validating, and providing access to application settings.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass


@dataclass
class AppConfig:
    """Application configuration settings."""
    host: str
    port: int
    debug: bool


@dataclass
class ContentConfig:
    """Content loading and listing settings."""
    content_dir: str
    include_drafts: bool
    summary_length: int
    per_page: int


@dataclass
class TagsConfig:
    """Tag normalization settings."""
    display_casing: str


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


class ConfigManager:
    """Manages application configuration loading and access."""

    def __init__(self, config_file: str = "blog_config.json"):
        self.config_file = Path(config_file)
        self._config: Optional[Dict[str, Any]] = None
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file and environment variables."""
        # Start with default config
        self._config = self._get_default_config()

        # Load base config from file
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    file_config = json.load(f)
                    # Merge file config with defaults
                    self._merge_config(file_config)
            except (json.JSONDecodeError, FileNotFoundError):
                # Keep default config if file is invalid or not found
                pass

        # Override with environment variables
        self._override_with_env()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "app": {
                "host": "0.0.0.0",
                "port": 3000,
                "debug": False
            },
            "content": {
                "content_dir": "data/blog",
                "include_drafts": False,
                "summary_length": 200,
                "per_page": 5
            },
            "tags": {
                "display_casing": "first_seen"
            }
        }

    def _merge_config(self, file_config: Dict[str, Any]) -> None:
        """Merge file configuration with current config."""
        for section, values in file_config.items():
            if section in self._config:
                if isinstance(values, dict):
                    self._config[section].update(values)
                else:
                    self._config[section] = values
            else:
                self._config[section] = values

    def _override_with_env(self) -> None:
        """Override configuration with environment variables."""
        # App settings
        if os.getenv("APP_HOST"):
            self._config["app"]["host"] = os.getenv("APP_HOST")

        if os.getenv("APP_PORT"):
            self._config["app"]["port"] = int(os.getenv("APP_PORT"))

        if os.getenv("APP_DEBUG"):
            self._config["app"]["debug"] = _env_bool(os.getenv("APP_DEBUG"))

        # Content settings
        if os.getenv("CONTENT_DIR"):
            self._config["content"]["content_dir"] = os.getenv("CONTENT_DIR")

        if os.getenv("INCLUDE_DRAFTS"):
            self._config["content"]["include_drafts"] = _env_bool(os.getenv("INCLUDE_DRAFTS"))

        if os.getenv("SUMMARY_LENGTH"):
            self._config["content"]["summary_length"] = int(os.getenv("SUMMARY_LENGTH"))

        if os.getenv("POSTS_PER_PAGE"):
            self._config["content"]["per_page"] = int(os.getenv("POSTS_PER_PAGE"))

        # Tag settings
        if os.getenv("TAG_DISPLAY_CASING"):
            self._config["tags"]["display_casing"] = os.getenv("TAG_DISPLAY_CASING").strip().lower()

    def get_app_config(self) -> AppConfig:
        """Get application configuration."""
        app_config = self._config["app"]
        return AppConfig(
            host=app_config["host"],
            port=app_config["port"],
            debug=app_config["debug"]
        )

    def get_content_config(self) -> ContentConfig:
        """Get content configuration."""
        content_config = self._config["content"]
        return ContentConfig(
            content_dir=content_config["content_dir"],
            include_drafts=content_config["include_drafts"],
            summary_length=content_config["summary_length"],
            per_page=content_config["per_page"]
        )

    def get_tags_config(self) -> TagsConfig:
        """Get tag configuration."""
        tags_config = self._config["tags"]
        return TagsConfig(
            display_casing=tags_config["display_casing"]
        )

    def get_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        return self._config.copy()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def save_config(self) -> None:
        """Save current configuration to file."""
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)
