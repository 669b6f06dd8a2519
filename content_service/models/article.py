"""
Article data models.

This module contains Pydantic models for blog articles and search queries.
"""

import datetime
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .tags import clean_tag, tag_key


def parse_publication_date(value: Any) -> datetime.date:
    """Parse a publication date from front matter or JSON.

    Accepts date/datetime objects, ISO dates ("2024-06-01") and ISO datetimes
    ("2024-06-01T08:30:00Z"). Datetimes are reduced to their calendar date.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError("publication date is required")
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return datetime.date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            raise ValueError(f"unparseable publication date '{value}'")
    raise ValueError(f"unparseable publication date {value!r}")


class Article(BaseModel):
    """A single blog article as seen by the index and search."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(description="Unique identifier derived from the source path")
    title: str = Field(default="", description="Article title")
    date: datetime.date = Field(description="Publication date, the listing sort key")
    tags: Tuple[str, ...] = Field(default=(), description="Whitespace-normalized tags in source order")
    summary: str = Field(default="", description="Short summary shown in listings")
    body: Optional[str] = Field(default=None, description="Opaque reference to the full content")
    draft: bool = Field(default=False, description="Whether the article is unpublished")
    last_modified: Optional[datetime.date] = Field(default=None, description="Last modification date")

    @field_validator("slug", mode="before")
    @classmethod
    def _validate_slug(cls, value: Any) -> str:
        slug = str(value or "").strip().strip("/")
        if not slug:
            raise ValueError("slug must not be empty")
        return slug

    @field_validator("date", mode="before")
    @classmethod
    def _validate_date(cls, value: Any) -> datetime.date:
        return parse_publication_date(value)

    @field_validator("last_modified", mode="before")
    @classmethod
    def _validate_last_modified(cls, value: Any) -> Optional[datetime.date]:
        if value is None or value == "":
            return None
        return parse_publication_date(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _validate_tags(cls, value: Any) -> Tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = value.split(",")
        elif not isinstance(value, (list, tuple, set, frozenset)):
            raise ValueError("tags must be a list or a comma-separated string")
        tags: List[str] = []
        seen = set()
        for raw in value:
            tag = clean_tag(raw)
            key = tag_key(tag)
            if not tag or key in seen:
                continue
            seen.add(key)
            tags.append(tag)
        return tuple(tags)

    @field_validator("title", "summary", mode="before")
    @classmethod
    def _validate_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return self.model_dump(mode="json")


class SearchQuery(BaseModel):
    """Transient search input: free text plus an optional tag filter."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(default="", description="Free-text query, only \"\" matches everything")
    tag: Optional[str] = Field(default=None, description="Tag filter, None or 'all' for no filter")

    @field_validator("query", mode="before")
    @classmethod
    def _validate_query(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @property
    def needle(self) -> str:
        """Lowercased query used for substring matching."""
        return self.query.lower()
