"""
Content loader for article sources.

Reads Markdown/MDX files with YAML front matter and JSON article records from
a content directory, producing raw article records for the index builder.
Validation of slugs and dates happens when the index is built.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .exceptions import MalformedArticleError
from .markdown_processor import extract_excerpt, extract_title, split_front_matter

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".mdx")
JSON_SUFFIXES = (".json",)
SUPPORTED_SUFFIXES = MARKDOWN_SUFFIXES + JSON_SUFFIXES


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return bool(value)


class ContentLoader:
    """Service for reading article records from the content directory."""

    def __init__(self, content_dir: Path, include_drafts: bool = False, summary_length: int = 200):
        self.content_dir = Path(content_dir)
        self.include_drafts = include_drafts
        self.summary_length = summary_length

    def iter_source_files(self) -> List[Path]:
        """List article source files in a stable, path-sorted order."""
        if not self.content_dir.is_dir():
            return []
        return sorted(
            p for p in self.content_dir.rglob("*")
            if p.is_file() and p.suffix.lower() in SUPPORTED_SUFFIXES
        )

    def slug_for(self, path: Path) -> str:
        """Derive an article slug from its path relative to the content dir.

        ``blog/aws-intro.mdx`` becomes ``blog/aws-intro`` and
        ``blog/aws-intro/index.md`` becomes ``blog/aws-intro``.
        """
        relative = path.relative_to(self.content_dir).with_suffix("")
        parts = list(relative.parts)
        if len(parts) > 1 and parts[-1].lower() == "index":
            parts = parts[:-1]
        return "/".join(parts).lower()

    def load_records(self) -> List[Dict[str, Any]]:
        """Load raw article records for every published source file.

        Returns an empty list when the content directory does not exist.

        Raises:
            MalformedArticleError: If a source file cannot be parsed.
        """
        if not self.content_dir.is_dir():
            logger.warning("Content directory %s does not exist, no articles loaded", self.content_dir)
            return []

        records: List[Dict[str, Any]] = []
        skipped_drafts = 0
        for path in self.iter_source_files():
            record = self.load_record(path)
            if record.get("draft") and not self.include_drafts:
                logger.debug("Skipping draft article %s", record["body"])
                skipped_drafts += 1
                continue
            records.append(record)

        logger.info(
            "Loaded %d article records from %s (%d drafts skipped)",
            len(records), self.content_dir, skipped_drafts,
        )
        return records

    def load_record(self, path: Path) -> Dict[str, Any]:
        """Load a single source file into a raw article record."""
        source = path.relative_to(self.content_dir).as_posix()
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise MalformedArticleError(source, f"cannot read file: {e}")

        if path.suffix.lower() in JSON_SUFFIXES:
            metadata, body_text = self._parse_json(source, text)
        else:
            try:
                metadata, body_text = split_front_matter(text)
            except ValueError as e:
                raise MalformedArticleError(source, str(e))

        return self._build_record(path, source, metadata, body_text)

    def _parse_json(self, source: str, text: str):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedArticleError(source, f"invalid JSON: {e}")
        if not isinstance(data, dict):
            raise MalformedArticleError(source, "JSON article record must be an object")
        body_text = data.pop("content", None) or ""
        return data, str(body_text)

    def _build_record(self, path: Path, source: str, metadata: Dict[str, Any], body_text: str) -> Dict[str, Any]:
        slug = self.slug_for(path)

        title = metadata.get("title")
        if not title:
            title = extract_title(body_text) or slug.rsplit("/", 1)[-1]

        summary: Optional[str] = metadata.get("summary")
        if not summary:
            summary = extract_excerpt(body_text, self.summary_length)

        return {
            "slug": slug,
            "title": title,
            "date": metadata.get("date"),
            "tags": metadata.get("tags") or [],
            "summary": summary,
            "body": source,
            "draft": _as_bool(metadata.get("draft", False)),
            "last_modified": metadata.get("lastmod") or metadata.get("last_modified"),
        }
