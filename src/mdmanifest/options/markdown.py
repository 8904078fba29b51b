#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown to HTML rendering.

This module defines the options controlling syntax highlighting, responsive
image resolution and token collection for ``render_markdown``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from mdmanifest.constants import (
    ANIMATED_IMAGE_MODES,
    DEFAULT_ANIMATED_IMAGE_MODE,
    DEFAULT_DETECT_CODE_LANGUAGE,
    DEFAULT_HEADING_IDS,
    DEFAULT_HTML_TOKEN_MODE,
    DEFAULT_PICTURE_SIZES,
    DEFAULT_SYNTAX_HIGHLIGHTING,
    HTML_TOKEN_MODES,
    AnimatedImageMode,
    HtmlTokenMode,
)
from mdmanifest.options.base import CloneFrozenMixin


# src/mdmanifest/options/markdown.py
@dataclass(frozen=True)
class MarkdownRenderOptions(CloneFrozenMixin):
    """Configuration options for rendering Markdown to HTML.

    Parameters
    ----------
    static_dir : str, Path or None, default None
        Static-asset root used to look up responsive image variants. Image
        references are joined onto this directory; a reference naming a
        directory of ``<width>.<ext>`` files is rendered as a ``<picture>``.
        When None, images are rendered unchanged.
    syntax_highlighting : bool, default True
        Highlight fenced code blocks whose language is on the allow-list.
    detect_code_language : bool, default False
        For untagged code blocks, treat a first line consisting only of a
        supported language name as the language tag.
    animated_image_mode : {"lazy", "picture"}, default "lazy"
        How animated images (``.gif``) are rendered:
        - "lazy": emit ``<img data-src=...>`` and record ``async-img``
        - "picture": resolve them like any other image
    html_token_mode : {"generic", "elements"}, default "generic"
        Token granularity for raw HTML:
        - "generic": record a single ``rawhtml`` token
        - "elements": also record embedded elements that are known tokens
    picture_sizes : str, default "100vw"
        Value of the ``sizes`` attribute on generated ``<source>`` elements.
    image_paragraph_class : str or None, default None
        CSS class added to a paragraph whose only content is an image.
    heading_ids : bool, default True
        Emit slug ``id`` attributes on headings.

    """

    static_dir: str | Path | None = field(
        default=None,
        metadata={"help": "Static-asset directory holding responsive image variants", "importance": "core"},
    )
    syntax_highlighting: bool = field(
        default=DEFAULT_SYNTAX_HIGHLIGHTING,
        metadata={"help": "Syntax highlight code blocks in supported languages", "importance": "core"},
    )
    detect_code_language: bool = field(
        default=DEFAULT_DETECT_CODE_LANGUAGE,
        metadata={"help": "Detect the language of untagged code blocks from their first line", "importance": "advanced"},
    )
    animated_image_mode: AnimatedImageMode = field(
        default=DEFAULT_ANIMATED_IMAGE_MODE,
        metadata={
            "help": "Animated image handling: 'lazy' (data-src) or 'picture' (resolve like other images)",
            "choices": list(ANIMATED_IMAGE_MODES),
            "importance": "advanced",
        },
    )
    html_token_mode: HtmlTokenMode = field(
        default=DEFAULT_HTML_TOKEN_MODE,
        metadata={
            "help": "Raw HTML token granularity: 'generic' (rawhtml only) or 'elements' (also embedded tags)",
            "choices": list(HTML_TOKEN_MODES),
            "importance": "advanced",
        },
    )
    picture_sizes: str = field(
        default=DEFAULT_PICTURE_SIZES,
        metadata={"help": "sizes attribute for responsive <source> elements", "importance": "advanced"},
    )
    image_paragraph_class: str | None = field(
        default=None,
        metadata={"help": "CSS class for paragraphs containing only an image", "importance": "advanced"},
    )
    heading_ids: bool = field(
        default=DEFAULT_HEADING_IDS,
        metadata={"help": "Add slug id attributes to headings", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate enumerated option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.animated_image_mode not in ANIMATED_IMAGE_MODES:
            raise ValueError(
                f"animated_image_mode must be one of {ANIMATED_IMAGE_MODES}, got {self.animated_image_mode!r}"
            )
        if self.html_token_mode not in HTML_TOKEN_MODES:
            raise ValueError(f"html_token_mode must be one of {HTML_TOKEN_MODES}, got {self.html_token_mode!r}")
        if not isinstance(self.picture_sizes, str):
            raise ValueError(f"picture_sizes must be a string, got {type(self.picture_sizes).__name__}")
        if not self.picture_sizes.strip():
            raise ValueError("picture_sizes must not be empty")

    def resolved_static_dir(self) -> Path | None:
        """Return ``static_dir`` as an absolute path, or None when unset."""
        if self.static_dir is None or str(self.static_dir) == "":
            return None
        return Path(self.static_dir).resolve()
