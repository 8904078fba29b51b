#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdmanifest/api.py
"""Public rendering entry points.

``render_markdown`` turns Markdown text into HTML and reports which element
families the HTML uses, so a page can load CSS/JS only for the features it
actually contains::

    >>> from mdmanifest import render_markdown
    >>> result = render_markdown("# Hello World")
    >>> result.html
    '<h1 id="hello-world">Hello World</h1>'
    >>> result.tokens
    ['h1']

"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from mdmanifest.constants import DEPS_HIGHLIGHT, DEPS_MARKDOWN, MARKDOWN_PLUGINS
from mdmanifest.exceptions import InvalidInputError
from mdmanifest.options.markdown import MarkdownRenderOptions
from mdmanifest.tokens import RenderSession
from mdmanifest.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderResult:
    """Outcome of one render.

    Parameters
    ----------
    html : str
        Rendered HTML with surrounding whitespace trimmed
    tokens : list of str
        Distinct construct tokens present in ``html``, sorted

    """

    html: str
    tokens: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the result as ``{"html": ..., "tokens": [...]}``."""
        return {"html": self.html, "tokens": list(self.tokens)}


def _describe_input(value: Any) -> str:
    try:
        return json.dumps(value, default=repr)
    except (TypeError, ValueError):
        # non-str dict keys and circular containers
        return repr(value)


def _prepare_options(options: Optional[MarkdownRenderOptions], kwargs: dict[str, Any]) -> MarkdownRenderOptions:
    final_options = options or MarkdownRenderOptions()
    if kwargs:
        final_options = final_options.create_updated(**kwargs)
    return final_options


@requires_dependencies("Markdown rendering", DEPS_MARKDOWN + DEPS_HIGHLIGHT)
def render_markdown(
    markdown: Any,
    options: Optional[MarkdownRenderOptions] = None,
    **kwargs: Any,
) -> RenderResult:
    """Render Markdown to HTML and collect the construct tokens it uses.

    Parameters
    ----------
    markdown : str
        Markdown source text
    options : MarkdownRenderOptions, optional
        Rendering options. Defaults to ``MarkdownRenderOptions()``.
    kwargs : Any
        Individual option overrides applied on top of ``options``
        (e.g. ``static_dir="site/static"``).

    Returns
    -------
    RenderResult
        Trimmed HTML and the sorted, deduplicated token list.

    Raises
    ------
    InvalidInputError
        If ``markdown`` is not a string.
    ValidationError
        If a keyword argument does not name an option.
    DependencyError
        If mistune or Pygments is missing or too old.

    Examples
    --------
    Responsive images from a static directory:

        >>> result = render_markdown("![Beach](/photos/beach.jpg)", static_dir="site/static")

    Reusing options across calls:

        >>> opts = MarkdownRenderOptions(static_dir="site/static", image_paragraph_class="u-img")
        >>> result = render_markdown(text, opts)

    """
    if not isinstance(markdown, str):
        raise InvalidInputError(
            f"You must provide a string to render_markdown(); got {_describe_input(markdown)}",
            parameter_value=markdown,
        )

    final_options = _prepare_options(options, kwargs)

    import mistune

    from mdmanifest.renderers.html import TokenCollectingRenderer

    session = RenderSession(static_dir=final_options.resolved_static_dir())
    renderer = TokenCollectingRenderer(session, final_options)
    md = mistune.create_markdown(renderer=renderer, plugins=list(MARKDOWN_PLUGINS))

    with debug_timer(logger, "Rendering markdown"):
        html = md(markdown)

    return RenderResult(html=html.strip(), tokens=session.tokens.drain())


async def render_markdown_async(
    markdown: Any,
    options: Optional[MarkdownRenderOptions] = None,
    **kwargs: Any,
) -> RenderResult:
    """Awaitable form of :func:`render_markdown`.

    The render runs in a worker thread; it shares no state with other
    renders, so any number of calls may be in flight at once.
    """
    return await asyncio.to_thread(render_markdown, markdown, options, **kwargs)


__all__ = [
    "RenderResult",
    "render_markdown",
    "render_markdown_async",
]
