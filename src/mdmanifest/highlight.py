#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdmanifest/highlight.py
"""Syntax highlighting adapter built on Pygments.

The adapter highlights code for languages on a fixed allow-list. It never
degrades on its own: engine failures are raised as ``HighlightError`` and
the code-block hook decides how to fall back.

"""

from __future__ import annotations

import logging

from mdmanifest.constants import SUPPORTED_LANGUAGES
from mdmanifest.exceptions import HighlightError

logger = logging.getLogger(__name__)


def is_supported_language(language: str | None) -> bool:
    """Return True when ``language`` is on the allow-list (case-sensitive)."""
    return bool(language) and language in SUPPORTED_LANGUAGES


def highlight_code(code: str, language: str) -> str:
    """Highlight source code as HTML.

    Parameters
    ----------
    code : str
        Raw source text
    language : str
        Language tag; allow-listed names are mapped to their Pygments alias,
        anything else is passed to Pygments as-is.

    Returns
    -------
    str
        Escaped HTML made of Pygments token ``<span>`` elements, without an
        enclosing ``<pre>`` or ``<div>``.

    Raises
    ------
    HighlightError
        If Pygments has no lexer for the language or fails while highlighting.

    """
    from pygments import highlight
    from pygments.formatters import HtmlFormatter
    from pygments.lexers import get_lexer_by_name

    alias = SUPPORTED_LANGUAGES.get(language, language)
    try:
        lexer = get_lexer_by_name(alias, stripnl=False)
        return highlight(code, lexer, HtmlFormatter(nowrap=True))
    except Exception as e:
        raise HighlightError(
            f"Failed to highlight code as '{language}': {e}",
            language=language,
            original_error=e,
        ) from e


def detect_language(code: str) -> tuple[str | None, str]:
    """Detect a language tag written on the first line of an untagged code block.

    Parameters
    ----------
    code : str
        Code block content

    Returns
    -------
    tuple
        ``(language, code)``. When the first line is exactly a supported
        language name, that line is removed from the returned code.
        Otherwise ``(None, code)`` with the code untouched.

    """
    first_line, _, rest = code.partition("\n")
    candidate = first_line.strip()
    if is_supported_language(candidate):
        logger.debug("Detected language '%s' from first line of code block", candidate)
        return candidate, rest

    logger.debug("No language detected in: %s", candidate)
    return None, code


__all__ = [
    "detect_language",
    "highlight_code",
    "is_supported_language",
]
