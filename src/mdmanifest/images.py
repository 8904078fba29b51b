#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdmanifest/images.py
"""Responsive image resolution.

Images are expected to be pre-resized and stored in a directory named after
the image reference, one file per width::

    static/
        photos/beach.jpg/
            400.jpg
            800.jpg
            400.webp
            800.webp

An image reference ``/photos/beach.jpg`` is joined onto the static-asset
root. When it names such a directory, the files are split into a modern
bucket (``.webp``) and a fallback bucket (everything else), each becoming a
``srcset``. Any other outcome means "no variants" and the caller renders
the image unchanged.

"""

from __future__ import annotations

import logging
import posixpath
import re
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urlsplit

from mdmanifest.constants import (
    ANIMATED_IMAGE_EXTENSIONS,
    EXTERNAL_URL_PREFIX,
    IMAGE_VARIANT_GLOB,
    MODERN_IMAGE_EXTENSIONS,
    MODERN_IMAGE_MIME_TYPE,
)
from mdmanifest.utils.text import escape_attribute

logger = logging.getLogger(__name__)

_WIDTH_PATTERN = re.compile(r"[0-9]+")


@dataclass
class ImageVariantSet:
    """Resolution variants found for one image reference.

    Both mappings go from pixel width to URL and keep directory listing
    order, which is the order used in the generated ``srcset``.

    Parameters
    ----------
    modern : dict of int to str
        Next-generation format variants (``.webp``)
    fallback : dict of int to str
        Variants in every other format

    """

    modern: dict[int, str] = field(default_factory=dict)
    fallback: dict[int, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.modern and not self.fallback

    @property
    def modern_srcset(self) -> str:
        return _build_srcset(self.modern)

    @property
    def fallback_srcset(self) -> str:
        return _build_srcset(self.fallback)

    @property
    def fallback_src(self) -> str | None:
        """URL of the widest fallback variant, or of the widest modern one if there is no fallback."""
        candidates = self.fallback or self.modern
        if not candidates:
            return None
        return candidates[max(candidates)]


def _build_srcset(variants: dict[int, str]) -> str:
    return ", ".join(f"{url} {width}w" for width, url in variants.items())


def is_external_image(url: str) -> bool:
    """Return True for absolute URLs (``http://``, ``https://``)."""
    return url.startswith(EXTERNAL_URL_PREFIX)


def is_animated_image(url: str) -> bool:
    """Return True when the reference's extension marks an animated format."""
    suffix = posixpath.splitext(urlsplit(url).path)[1].lower()
    return suffix in ANIMATED_IMAGE_EXTENSIONS


def parse_width(stem: str) -> int | None:
    """Parse a filename stem as a pixel width.

    Only plain non-negative integers are accepted; ``"2.5"``, ``"-1"`` or
    ``"large"`` return None.
    """
    if not _WIDTH_PATTERN.fullmatch(stem):
        return None
    return int(stem)


def scan_variants(directory: Path, href: str) -> ImageVariantSet:
    """Build the variant set for a directory of width-named image files.

    Parameters
    ----------
    directory : Path
        Directory holding the variants
    href : str
        Image reference the directory was resolved from; variant URLs are
        ``href`` joined with the file name.

    Returns
    -------
    ImageVariantSet
        Variants in name order. Entries whose stem is not a width are skipped.

    Raises
    ------
    OSError
        If the directory cannot be listed.

    """
    variants = ImageVariantSet()
    for entry in sorted(directory.glob(IMAGE_VARIANT_GLOB)):
        if not entry.is_file():
            continue

        width = parse_width(entry.stem)
        if width is None:
            logger.warning(f"Skipping image variant with non-numeric width: {entry}")
            continue

        bucket = variants.modern if entry.suffix.lower() in MODERN_IMAGE_EXTENSIONS else variants.fallback
        if width in bucket:
            logger.debug(f"Ignoring duplicate {width}w image variant: {entry}")
            continue
        bucket[width] = posixpath.join(href, entry.name)

    return variants


def resolve_image_variants(href: str, static_dir: Path | None) -> ImageVariantSet | None:
    """Look up the responsive variants for an image reference.

    Parameters
    ----------
    href : str
        Image reference from the Markdown source
    static_dir : Path or None
        Absolute static-asset root

    Returns
    -------
    ImageVariantSet or None
        The variants, or None when the image should be rendered unchanged:
        external URL, no static directory, missing path, a plain file, a path
        escaping the static directory, an unreadable directory or a
        directory without usable variants.

    """
    if is_external_image(href) or static_dir is None:
        return None

    try:
        root = static_dir.resolve()
        candidate = (root / href.lstrip("/")).resolve()
        if not candidate.is_relative_to(root):
            logger.debug(f"Image path {href} resolves outside of {static_dir}")
            return None
        if not candidate.is_dir():
            return None
        variants = scan_variants(candidate, href)
    except (OSError, ValueError) as e:
        logger.debug(f"Could not read image variants for {href}: {e}")
        return None

    if variants.is_empty:
        return None
    return variants


def render_picture(variants: ImageVariantSet, alt: str, sizes: str) -> str:
    """Render a ``<picture>`` element for a variant set.

    Parameters
    ----------
    variants : ImageVariantSet
        Non-empty variant set
    alt : str
        Plain alternative text (escaped here)
    sizes : str
        Value for the ``sizes`` attribute of each ``<source>``

    Returns
    -------
    str
        ``<picture>`` markup with a modern ``<source>`` (when present), a
        fallback ``<source>`` (when present) and an ``<img>`` pointing at the
        widest fallback variant.

    """
    sizes_attr = escape_attribute(sizes)
    parts = ["<picture>"]
    if variants.modern:
        parts.append(
            f'<source srcset="{escape_attribute(variants.modern_srcset)}" sizes="{sizes_attr}" '
            f'type="{MODERN_IMAGE_MIME_TYPE}">'
        )
    if variants.fallback:
        parts.append(f'<source srcset="{escape_attribute(variants.fallback_srcset)}" sizes="{sizes_attr}">')
    src = escape_attribute(variants.fallback_src or "")
    parts.append(f'<img src="{src}" alt="{escape_attribute(alt)}" />')
    parts.append("</picture>")
    return "".join(parts)


__all__ = [
    "ImageVariantSet",
    "is_animated_image",
    "is_external_image",
    "parse_width",
    "render_picture",
    "resolve_image_variants",
    "scan_variants",
]
