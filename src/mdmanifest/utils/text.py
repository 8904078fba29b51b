#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdmanifest/utils/text.py
"""Text helpers for heading anchors and attribute values."""

from __future__ import annotations

import html
import re
import unicodedata
from typing import Set

from mdmanifest.constants import DEFAULT_SLUG_MAX_LENGTH

_TAG_PATTERN = re.compile(r"<[^>]*>")


def strip_html_tags(text: str) -> str:
    """Remove HTML tags from rendered inline content, keeping the text."""
    return _TAG_PATTERN.sub("", text)


def plain_text(fragment: str) -> str:
    """Reduce rendered inline HTML to unescaped plain text."""
    return html.unescape(strip_html_tags(fragment))


def escape_attribute(value: str) -> str:
    """Escape a string for use inside a double-quoted HTML attribute."""
    return html.escape(value, quote=True)


def slugify(text: str, *, seen_slugs: Set[str] | None = None, max_length: int = DEFAULT_SLUG_MAX_LENGTH) -> str:
    """Create a URL-safe heading anchor from text with collision avoidance.

    The slug is built by:
    - Decoding HTML entities produced by the inline renderer
    - Normalizing Unicode characters (NFD decomposition) and dropping accents
    - Converting to lowercase
    - Replacing whitespace and underscores with hyphens
    - Removing non-alphanumeric characters (except hyphens)
    - Collapsing multiple consecutive hyphens and stripping the ends
    - Handling collisions by appending -2, -3, etc.

    Parameters
    ----------
    text : str
        Plain heading text
    seen_slugs : Set[str] or None, default = None
        Slugs already used in the current document. The new slug is added
        to this set.
    max_length : int, default = 100
        Maximum length of the slug before collision suffixes

    Returns
    -------
    str
        URL-safe slug, unique if seen_slugs is provided

    Examples
    --------
        >>> slugify("Hello World")
        'hello-world'
        >>> seen = set()
        >>> slugify("Intro", seen_slugs=seen), slugify("Intro", seen_slugs=seen)
        ('intro', 'intro-2')

    """
    normalized = unicodedata.normalize("NFD", html.unescape(text))
    normalized = "".join(char for char in normalized if unicodedata.category(char) != "Mn")

    slug = normalized.lower()
    slug = re.sub(r"[\s_]+", "-", slug)
    slug = re.sub(r"[^a-z0-9\-]", "", slug)
    slug = re.sub(r"-+", "-", slug)
    slug = slug.strip("-")

    if not slug:
        slug = "section"

    if len(slug) > max_length:
        slug = slug[:max_length].rstrip("-")

    if seen_slugs is not None:
        if slug not in seen_slugs:
            seen_slugs.add(slug)
            return slug

        counter = 2
        while f"{slug}-{counter}" in seen_slugs:
            counter += 1

        unique_slug = f"{slug}-{counter}"
        seen_slugs.add(unique_slug)
        return unique_slug

    return slug


__all__ = [
    "escape_attribute",
    "plain_text",
    "slugify",
    "strip_html_tags",
]
