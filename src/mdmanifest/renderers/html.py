#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdmanifest/renderers/html.py
"""Token-collecting HTML renderer.

This module provides ``TokenCollectingRenderer``, a mistune ``HTMLRenderer``
with one hook per Markdown construct. Every hook records the element family
it emits in the render session, applies the construct's transform (syntax
highlighting, responsive images) and otherwise produces the same markup as
mistune's baseline renderer.

Mistune calls the hooks in document order during a single pass, so one
renderer instance must only ever serve one render call.

"""

from __future__ import annotations

import logging
from typing import Any

import mistune

from mdmanifest.constants import (
    CODE_LANGUAGE_CLASS_PREFIX,
    DEPS_HTML,
    ELEMENT_TOKENS,
    HEADING_TOKENS,
)
from mdmanifest.exceptions import HighlightError
from mdmanifest.highlight import detect_language, highlight_code, is_supported_language
from mdmanifest.images import is_animated_image, render_picture, resolve_image_variants
from mdmanifest.options.markdown import MarkdownRenderOptions
from mdmanifest.tokens import RenderSession
from mdmanifest.utils.decorators import requires_dependencies
from mdmanifest.utils.text import escape_attribute, plain_text, slugify

logger = logging.getLogger(__name__)


@requires_dependencies("raw HTML element tokens", DEPS_HTML)
def embedded_element_tokens(fragment: str) -> set[str]:
    """Return the construct tokens named by the elements of a raw HTML fragment.

    Parameters
    ----------
    fragment : str
        Raw HTML passed through from the Markdown source

    Returns
    -------
    set of str
        Tag names found in the fragment that are also construct tokens

    """
    from bs4 import BeautifulSoup

    soup = BeautifulSoup(fragment, "html.parser")
    return {tag.name for tag in soup.find_all(True) if tag.name in ELEMENT_TOKENS}


class TokenCollectingRenderer(mistune.HTMLRenderer):
    """Render Markdown constructs to HTML while recording the tokens used.

    Parameters
    ----------
    session : RenderSession
        State owned by the current render call
    options : MarkdownRenderOptions or None, default None
        Rendering options

    Examples
    --------
        >>> import mistune
        >>> session = RenderSession()
        >>> renderer = TokenCollectingRenderer(session)
        >>> md = mistune.create_markdown(renderer=renderer)
        >>> md("# Title")
        '<h1 id="title">Title</h1>\\n'
        >>> session.tokens.drain()
        ['h1']

    """

    def __init__(self, session: RenderSession, options: MarkdownRenderOptions | None = None):
        """Initialize the renderer for one session."""
        super().__init__(escape=False)
        self.session = session
        self.options = options or MarkdownRenderOptions()

    def _record(self, *tokens: str) -> None:
        for token in tokens:
            self.session.tokens.add(token)

    # Block constructs

    def heading(self, text: str, level: int, **attrs: Any) -> str:
        """Render a heading, recording ``h<level>`` and adding a slug id.

        Raises
        ------
        IndexError
            If ``level`` is outside 1-6.

        """
        if not 1 <= level <= len(HEADING_TOKENS):
            raise IndexError(f"Heading level out of range: {level}")
        self._record(HEADING_TOKENS[level - 1])

        if self.options.heading_ids and not attrs.get("id"):
            attrs["id"] = slugify(plain_text(text), seen_slugs=self.session.seen_slugs)
        return super().heading(text, level, **attrs)

    def paragraph(self, text: str) -> str:
        self._record("p")
        css_class = self.options.image_paragraph_class
        if css_class and text.strip() in self.session.image_cache:
            return f'<p class="{escape_attribute(css_class)}">{text}</p>\n'
        return super().paragraph(text)

    def block_code(self, code: str, info: str | None = None) -> str:
        """Render a code block, highlighting it when the language is supported.

        Unsupported languages and highlighter failures are logged and the
        block is rendered exactly like an untagged one.

        Parameters
        ----------
        code : str
            Raw code block content
        info : str or None
            Fence info string; its first word is the language tag

        """
        self._record("pre", "code")

        language = info.split(None, 1)[0] if info and info.strip() else None
        if language is None and self.options.detect_code_language:
            language, code = detect_language(code)

        if language and not is_supported_language(language):
            logger.warning(f"Language '{language}' was not identified for syntax highlighting.")
            language = None

        if language and self.options.syntax_highlighting:
            try:
                highlighted = highlight_code(code, language)
            except HighlightError as e:
                logger.warning(f"An error occurred while highlighting code: {e}")
            else:
                self._record("code-highlighted")
                class_attr = escape_attribute(CODE_LANGUAGE_CLASS_PREFIX + language)
                return f'<pre><code class="{class_attr}">{highlighted}</code></pre>\n'

        return super().block_code(code)

    def block_quote(self, text: str) -> str:
        self._record("blockquote")
        return super().block_quote(text)

    def block_html(self, html: str) -> str:
        self._record_raw_html(html)
        return super().block_html(html)

    def thematic_break(self) -> str:
        self._record("hr")
        return super().thematic_break()

    def list(self, text: str, ordered: bool, **attrs: Any) -> str:
        self._record("ol" if ordered else "ul")
        return super().list(text, ordered, **attrs)

    def list_item(self, text: str) -> str:
        self._record("li")
        return super().list_item(text)

    # Table plugin constructs

    def table(self, text: str) -> str:
        self._record("table")
        return "<table>\n" + text + "</table>\n"

    def table_head(self, text: str) -> str:
        # The head holds its cells directly; mistune emits no separate row for it
        self._record("thead", "tr")
        return "<thead>\n<tr>\n" + text + "</tr>\n</thead>\n"

    def table_body(self, text: str) -> str:
        if not text.strip():
            return ""
        self._record("tbody")
        return "<tbody>\n" + text + "</tbody>\n"

    def table_row(self, text: str) -> str:
        self._record("tr")
        return "<tr>\n" + text + "</tr>\n"

    def table_cell(self, text: str, align: str | None = None, head: bool = False) -> str:
        tag = "th" if head else "td"
        self._record(tag)
        html = "  <" + tag
        if align:
            html += ' style="text-align:' + align + '"'
        return html + ">" + text + "</" + tag + ">\n"

    # Inline constructs

    def emphasis(self, text: str) -> str:
        self._record("em")
        return super().emphasis(text)

    def strong(self, text: str) -> str:
        self._record("strong")
        return super().strong(text)

    def strikethrough(self, text: str) -> str:
        self._record("del")
        return "<del>" + text + "</del>"

    def codespan(self, text: str) -> str:
        self._record("code")
        return super().codespan(text)

    def linebreak(self) -> str:
        self._record("br")
        return super().linebreak()

    def link(self, text: str, url: str, title: str | None = None) -> str:
        self._record("a")
        return super().link(text, url, title)

    def inline_html(self, html: str) -> str:
        self._record_raw_html(html)
        return super().inline_html(html)

    def image(self, text: str, url: str, title: str | None = None) -> str:
        """Render an image, upgrading local variant directories to ``<picture>``.

        Animated images are emitted as lazy ``data-src`` images when
        ``animated_image_mode`` is "lazy". Otherwise the reference is looked
        up under the static-asset directory; anything that is not a readable
        directory of width-named variants renders as a plain ``<img>``.

        Parameters
        ----------
        text : str
            Rendered alternative text
        url : str
            Image reference
        title : str or None
            Optional image title

        """
        self._record("img")
        alt = plain_text(text)

        if is_animated_image(url) and self.options.animated_image_mode == "lazy":
            self._record("async-img")
            markup = self._lazy_image(url, alt, title)
        else:
            variants = resolve_image_variants(url, self.session.static_dir)
            if variants is None:
                markup = super().image(text, url, title)
            else:
                markup = render_picture(variants, alt, self.options.picture_sizes)

        self.session.image_cache.append(markup)
        return markup

    def _lazy_image(self, url: str, alt: str, title: str | None) -> str:
        html = '<img data-src="' + self.safe_url(url) + '" alt="' + escape_attribute(alt) + '"'
        if title:
            html += ' title="' + escape_attribute(title) + '"'
        return html + " />"

    def _record_raw_html(self, html: str) -> None:
        self._record("rawhtml")
        if self.options.html_token_mode == "elements":
            self._record(*sorted(embedded_element_tokens(html)))


__all__ = [
    "TokenCollectingRenderer",
    "embedded_element_tokens",
]
