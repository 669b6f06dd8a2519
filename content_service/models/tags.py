"""
Tag normalization rules.

Tags are compared by a normalized key (whitespace collapsed, lowercased),
while the casing shown to readers is picked by the configured display policy.
"""

import re
from typing import Any

ALL_TAGS = "all"

_WHITESPACE_RE = re.compile(r"\s+")


def clean_tag(tag: Any) -> str:
    """Trim a tag and collapse internal whitespace, keeping its casing."""
    if tag is None:
        return ""
    return _WHITESPACE_RE.sub(" ", str(tag)).strip()


def tag_key(tag: Any) -> str:
    """Return the case-insensitive index key for a tag."""
    return clean_tag(tag).lower()


class TagNormalizer:
    """Normalizes tags into index keys and display names.

    display_casing:
        "first_seen" keeps the casing of the first article carrying the tag
        (walking the listing order); "lower" always shows the lowercased key.
    """

    DISPLAY_CASINGS = ("first_seen", "lower")

    def __init__(self, display_casing: str = "first_seen"):
        if display_casing not in self.DISPLAY_CASINGS:
            raise ValueError(
                f"Unknown tag display casing '{display_casing}', "
                f"expected one of {', '.join(self.DISPLAY_CASINGS)}"
            )
        self.display_casing = display_casing

    def clean(self, tag: Any) -> str:
        return clean_tag(tag)

    def key(self, tag: Any) -> str:
        return tag_key(tag)

    def display_name(self, tag: Any) -> str:
        if self.display_casing == "lower":
            return self.key(tag)
        return self.clean(tag)

    def is_all(self, tag: Any) -> bool:
        """Check whether a tag filter means "no tag restriction"."""
        key = self.key(tag)
        return not key or key == ALL_TAGS
