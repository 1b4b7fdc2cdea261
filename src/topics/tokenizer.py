from __future__ import annotations

"""Word tokenization with character spans."""

import re
from bisect import bisect_right

from src.topics.types import Token

_WORD_RE = re.compile(r"\w+")


def tokenize(text: str) -> list[Token]:
    """Split text into word tokens ordered by position."""
    if not text:
        return []
    return [
        Token(text=match.group(0), start=match.start(), end=match.end())
        for match in _WORD_RE.finditer(text)
    ]


def separators(text: str, tokens: list[Token]) -> list[str]:
    """Return the text around and between tokens (leading, inner, trailing)."""
    gaps: list[str] = []
    position = 0
    for token in tokens:
        gaps.append(text[position:token.start])
        position = token.end
    gaps.append(text[position:])
    return gaps


def word_at(tokens: list[Token], offset: int) -> int | None:
    """Return the index of the token containing a character offset."""
    if offset < 0 or not tokens:
        return None
    idx = bisect_right([token.start for token in tokens], offset) - 1
    if idx < 0:
        return None
    if offset < tokens[idx].end:
        return idx
    return None
