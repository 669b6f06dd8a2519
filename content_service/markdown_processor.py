"""
markdown_processor.py - Markdown processing utilities

This module splits article sources into YAML front matter and body, and
derives plain-text titles and excerpts from Markdown/MDX bodies.
"""

import html
import logging
import re
from typing import Any, Dict, Tuple

import markdown
import yaml

_LOG = logging.getLogger("markdown_processor")

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")
ELLIPSIS = "..."
# MDX module lines and component blocks carry no readable prose
_MDX_LINE_RE = re.compile(r"^\s*(import|export)\s|^\s*<")
# A fence is a whole line of exactly three dashes
_FENCE_RE = re.compile(r"^---[ \t]*\r?$", re.MULTILINE)


def split_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """Split a Markdown/MDX source into (metadata, body).

    Front matter opens with a first line that is exactly ``---`` and closes at
    the next line that is exactly ``---`` (trailing blanks allowed). Lines
    such as ``----`` or ``---foo`` are content, not fences. Sources without
    an opening fence have no metadata.

    Raises:
        ValueError: If the front matter block is unterminated, is not valid
            YAML, or is not a mapping.
    """
    text = text.lstrip("\ufeff")
    opening = _FENCE_RE.match(text)
    if opening is None:
        return {}, text

    closing = _FENCE_RE.search(text, opening.end())
    if closing is None:
        raise ValueError("Unterminated front matter block")

    front_matter = text[opening.end():closing.start()]
    body = text[closing.end():]
    if body.startswith("\n"):
        body = body[1:]

    try:
        metadata = yaml.safe_load(front_matter) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML front matter: {e}")

    if not isinstance(metadata, dict):
        raise ValueError("Front matter must be a mapping")
    return metadata, body


def clean_markdown_text(text: str) -> str:
    """Clean and normalize markdown text."""
    # Remove excessive whitespace
    text = re.sub(r"\n\s*\n\s*\n", "\n\n", text)

    # Normalize line endings
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    return text.strip()


def markdown_to_text(md_text: str) -> str:
    """Render Markdown and strip the markup down to plain text."""
    rendered = markdown.markdown(md_text)
    text = html.unescape(_TAG_RE.sub(" ", rendered))
    return _WHITESPACE_RE.sub(" ", text).strip()


def extract_title(md_text: str) -> str:
    """Extract title from markdown content."""
    for line in md_text.split("\n"):
        line = line.strip()
        # Look for # title or ## title patterns
        if line.startswith("#") and len(line) > 1:
            title = line.lstrip("#").strip()
            if title:
                return title
    return ""


def extract_excerpt(md_text: str, max_length: int = 200) -> str:
    """Build a plain-text excerpt from the first prose paragraph.

    Headings, fenced code and MDX import/export/component lines are skipped.
    Excerpts longer than ``max_length`` are cut at a word boundary and end
    with "...", the marker included in ``max_length``.
    """
    paragraph = []
    in_fence = False
    for line in clean_markdown_text(md_text).split("\n"):
        stripped = line.strip()
        if stripped.startswith("```") or stripped.startswith("~~~"):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        if not stripped:
            if paragraph:
                break
            continue
        if stripped.startswith("#") or _MDX_LINE_RE.match(stripped):
            if paragraph:
                break
            continue
        paragraph.append(stripped)

    if not paragraph:
        return ""

    text = markdown_to_text(" ".join(paragraph))
    if len(text) <= max_length:
        return text

    limit = max(max_length - len(ELLIPSIS), 0)
    cut = text[:limit]
    if text[limit] != " ":
        cut = cut.rsplit(" ", 1)[0]
    return cut.rstrip().rstrip(",.;:") + ELLIPSIS
