#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdmanifest/tokens.py
"""Per-render token accumulation.

A ``TokenAccumulator`` collects the construct identifiers the renderer
emits for one document. ``RenderSession`` bundles it with the rest of the
state a single render owns, so nothing is shared between calls.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from mdmanifest.constants import ALL_TOKENS


class TokenAccumulator:
    """Write-only, deduplicated set of construct tokens.

    Examples
    --------
        >>> tokens = TokenAccumulator()
        >>> tokens.add("p")
        >>> tokens.add("h1")
        >>> tokens.add("p")
        >>> tokens.drain()
        ['h1', 'p']

    """

    def __init__(self) -> None:
        """Initialize an empty accumulator."""
        self._tokens: set[str] = set()

    def add(self, token: str) -> None:
        """Record a construct token.

        Parameters
        ----------
        token : str
            Identifier from the closed token set

        Raises
        ------
        ValueError
            If ``token`` is not a known construct token.

        """
        if token not in ALL_TOKENS:
            raise ValueError(f"Unknown construct token: {token!r}")
        self._tokens.add(token)

    def drain(self) -> list[str]:
        """Return the recorded tokens, unique and lexicographically sorted."""
        return sorted(self._tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"TokenAccumulator({self.drain()!r})"


@dataclass
class RenderSession:
    """State owned by exactly one ``render_markdown`` call.

    Parameters
    ----------
    static_dir : Path or None
        Absolute static-asset root, or None when responsive images are disabled
    tokens : TokenAccumulator
        Tokens recorded by the render hooks
    image_cache : list of str
        Markup of every image rendered so far, used to spot image-only paragraphs
    seen_slugs : set of str
        Heading anchors already assigned in this document

    """

    static_dir: Path | None = None
    tokens: TokenAccumulator = field(default_factory=TokenAccumulator)
    image_cache: list[str] = field(default_factory=list)
    seen_slugs: set[str] = field(default_factory=set)
