#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdmanifest library.

This module centralizes hardcoded values used across the library so the
renderer, the image resolver and the highlighter agree on them.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Construct Tokens - The closed set of element families the renderer reports
3. Syntax Highlighting - Supported languages and lexer aliases
4. Responsive Images - Format buckets and markup defaults
5. Rendering Defaults - Default option values
6. Dependencies - Third-party packages required at render time
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

AnimatedImageMode = Literal["lazy", "picture"]
HtmlTokenMode = Literal["generic", "elements"]

Token = Literal[
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "pre",
    "code",
    "code-highlighted",
    "img",
    "async-img",
    "blockquote",
    "rawhtml",
    "hr",
    "ol",
    "ul",
    "li",
    "p",
    "strong",
    "em",
    "br",
    "del",
    "a",
    "table",
    "thead",
    "tbody",
    "tr",
    "td",
    "th",
]

# =============================================================================
# Construct Tokens
# =============================================================================

# Indexed by heading level - 1
HEADING_TOKENS: tuple[Token, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")

ALL_TOKENS: frozenset[str] = frozenset(
    HEADING_TOKENS
    + (
        "pre",
        "code",
        "code-highlighted",
        "img",
        "async-img",
        "blockquote",
        "rawhtml",
        "hr",
        "ol",
        "ul",
        "li",
        "p",
        "strong",
        "em",
        "br",
        "del",
        "a",
        "table",
        "thead",
        "tbody",
        "tr",
        "td",
        "th",
    )
)

# Tokens that are also literal HTML tag names (used by the "elements" raw HTML policy)
ELEMENT_TOKENS: frozenset[str] = ALL_TOKENS - {"code-highlighted", "async-img", "rawhtml"}

# =============================================================================
# Syntax Highlighting
# =============================================================================

# Allow-list of fenced-code languages mapped to the Pygments lexer alias used
# to highlight them. Membership is checked case-sensitively.
SUPPORTED_LANGUAGES: dict[str, str] = {
    "javascript": "javascript",
    "python": "python",
    "css": "css",
    "css-extras": "css",
    "bash": "bash",
    "java": "java",
    "go": "go",
    "typescript": "typescript",
    "php": "php",
    "sass": "sass",
    "html": "html",
    "xml": "xml",
}

CODE_LANGUAGE_CLASS_PREFIX = "language-"

# =============================================================================
# Responsive Images
# =============================================================================

MODERN_IMAGE_EXTENSIONS: frozenset[str] = frozenset({".webp"})
MODERN_IMAGE_MIME_TYPE = "image/webp"
ANIMATED_IMAGE_EXTENSIONS: frozenset[str] = frozenset({".gif"})
EXTERNAL_URL_PREFIX = "http"
IMAGE_VARIANT_GLOB = "*.*"

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_SYNTAX_HIGHLIGHTING = True
DEFAULT_DETECT_CODE_LANGUAGE = False
DEFAULT_ANIMATED_IMAGE_MODE: AnimatedImageMode = "lazy"
DEFAULT_HTML_TOKEN_MODE: HtmlTokenMode = "generic"
DEFAULT_PICTURE_SIZES = "100vw"
DEFAULT_HEADING_IDS = True
DEFAULT_SLUG_MAX_LENGTH = 100

ANIMATED_IMAGE_MODES: tuple[str, ...] = ("lazy", "picture")
HTML_TOKEN_MODES: tuple[str, ...] = ("generic", "elements")

# Mistune plugins providing the table and strikethrough constructs
MARKDOWN_PLUGINS: tuple[str, ...] = ("table", "strikethrough")

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_HIGHLIGHT = [("Pygments", "pygments", ">=2.15.0")]
DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]
