from __future__ import annotations

"""Word-level selection state for the current text buffer."""

from src.topics.errors import InvalidTokenError
from src.topics.tokenizer import tokenize, word_at
from src.topics.types import Group, Token


class SelectionModel:
    """Track selected tokens of one text buffer and derive adjacency groups."""
    def __init__(self, text: str = "") -> None:
        self._text = ""
        self._tokens: list[Token] = []
        self._selected: list[int] = []
        self.load_text(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def tokens(self) -> list[Token]:
        return list(self._tokens)

    @property
    def selected(self) -> list[int]:
        """Selected token indices in the order they were clicked."""
        return list(self._selected)

    def load_text(self, text: str) -> None:
        """Replace the text buffer; any previous selection is dropped."""
        self._text = text or ""
        self._tokens = tokenize(self._text)
        self._selected = []

    def is_selected(self, index: int) -> bool:
        return index in self._selected

    def select(self, index: int) -> bool:
        """Toggle a token and return whether it is now selected."""
        if index < 0 or index >= len(self._tokens):
            raise InvalidTokenError(f"No token at index {index}")
        if index in self._selected:
            self._selected.remove(index)
            return False
        self._selected.append(index)
        return True

    def select_at(self, offset: int) -> bool | None:
        """Toggle the whole word under a character offset, if any."""
        index = word_at(self._tokens, offset)
        if index is None:
            return None
        return self.select(index)

    def clear(self) -> None:
        self._selected = []

    def groups(self) -> list[Group]:
        """Merge selected tokens into runs of consecutive indices."""
        ordered = sorted(self._selected)
        runs: list[list[int]] = []
        for index in ordered:
            if runs and index == runs[-1][-1] + 1:
                runs[-1].append(index)
            else:
                runs.append([index])
        return [self._build_group(run) for run in runs]

    def _build_group(self, run: list[int]) -> Group:
        tokens = tuple(self._tokens[index] for index in run)
        gaps = tuple(
            self._text[left.end:right.start] for left, right in zip(tokens, tokens[1:])
        )
        return Group(tokens=tokens, separators=gaps)
