"""mdmanifest - Markdown to HTML rendering with a manifest of the elements used.

mdmanifest renders Markdown into HTML and reports which element families
(headings, lists, tables, highlighted code, ...) the output contains, so a
site can load CSS and JavaScript only for the features a page uses.

Key Features
------------
- Pygments syntax highlighting for an allow-list of languages, falling back
  to plain code blocks when a language is unknown or highlighting fails
- Responsive ``<picture>``/``srcset`` markup for local images stored as a
  directory of pre-resized, width-named files
- A sorted, deduplicated token list per render with no state shared between
  renders

Requirements
------------
- Python 3.10+
- mistune 3, Pygments, beautifulsoup4

Examples
--------
    >>> from mdmanifest import render_markdown
    >>> result = render_markdown("Hello **World**")
    >>> result.html
    '<p>Hello <strong>World</strong></p>'
    >>> result.tokens
    ['p', 'strong']

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdmanifest requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from mdmanifest.api import RenderResult, render_markdown, render_markdown_async
from mdmanifest.constants import ALL_TOKENS, SUPPORTED_LANGUAGES, Token
from mdmanifest.exceptions import (
    DependencyError,
    HighlightError,
    InvalidInputError,
    MdManifestError,
    ValidationError,
)
from mdmanifest.options import MarkdownRenderOptions
from mdmanifest.tokens import RenderSession, TokenAccumulator

__all__ = [
    "__version__",
    "ALL_TOKENS",
    "DependencyError",
    "HighlightError",
    "InvalidInputError",
    "MarkdownRenderOptions",
    "MdManifestError",
    "RenderResult",
    "RenderSession",
    "SUPPORTED_LANGUAGES",
    "Token",
    "TokenAccumulator",
    "ValidationError",
    "render_markdown",
    "render_markdown_async",
]
