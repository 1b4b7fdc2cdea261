from __future__ import annotations

"""Tokenizer behavior tests."""

import pytest

from src.topics.tokenizer import separators, tokenize, word_at
from src.topics.types import Token


def test_tokenize_returns_words_with_spans() -> None:
    tokens = tokenize("Hello, world!")

    assert tokens == [Token(text="Hello", start=0, end=5), Token(text="world", start=7, end=12)]


@pytest.mark.parametrize("text", ["", "   ", "\n\t", "... !!"])
def test_tokenize_without_words_is_empty(text: str) -> None:
    assert tokenize(text) == []


def test_tokenize_is_unicode_aware_and_keeps_underscores() -> None:
    tokens = tokenize("naïve café snake_case 42x")

    assert [token.text for token in tokens] == ["naïve", "café", "snake_case", "42x"]


@pytest.mark.parametrize(
    "text",
    [
        "The quick brown fox.",
        "  leading and trailing  ",
        "tabs\tand\nnewlines -- dashes",
        "über-straße, 3.14!",
    ],
)
def test_tokens_are_ordered_and_reconstruct_text(text: str) -> None:
    tokens = tokenize(text)
    gaps = separators(text, tokens)

    for left, right in zip(tokens, tokens[1:]):
        assert left.end <= right.start
    rebuilt = gaps[0] + "".join(token.text + gap for token, gap in zip(tokens, gaps[1:]))
    assert rebuilt == text


def test_word_at_finds_token_under_offset() -> None:
    tokens = tokenize("the cat sat")

    assert word_at(tokens, 4) == 1
    assert word_at(tokens, 6) == 1
    assert word_at(tokens, 7) is None
    assert word_at(tokens, 99) is None
    assert word_at(tokens, -1) is None
