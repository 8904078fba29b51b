#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for mdmanifest."""

from mdmanifest.options.base import CloneFrozenMixin
from mdmanifest.options.markdown import MarkdownRenderOptions

__all__ = [
    "CloneFrozenMixin",
    "MarkdownRenderOptions",
]
