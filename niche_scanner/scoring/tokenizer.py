"""
Interest tokenizer.

Normalisation: lowercase the text, split on every run of characters outside
``[a-z0-9+]``, strip, and drop empty pieces.  ``"C++, Tech-Career"`` yields
``c++``, ``tech``, ``career``.  No stemming and no de-duplication; repeated
tokens do not change matching results.
"""

from __future__ import annotations

import re
from typing import Iterator

_SPLIT_RE = re.compile(r"[^a-z0-9+]+")


class InterestTokens:
    """Lazy, restartable token sequence over a free-text interests string.

    Each ``iter()`` call re-scans the text from the start, so the same
    instance can be consumed once per niche without materialising a list.
    """

    __slots__ = ("_text",)

    def __init__(self, interests_text: str) -> None:
        self._text = (interests_text or "").lower()

    def __iter__(self) -> Iterator[str]:
        for piece in _SPLIT_RE.split(self._text):
            token = piece.strip()
            if token:
                yield token

    def __repr__(self) -> str:
        return f"InterestTokens({self._text!r})"


def tokenize(interests_text: str) -> InterestTokens:
    """Return the normalised token sequence for ``interests_text``."""
    return InterestTokens(interests_text)
