from __future__ import annotations

"""Compile selection groups into named patterns."""

from dataclasses import dataclass
from typing import Iterable, Literal

from src.topics.errors import EmptyNameError, EmptySelectionError
from src.topics.types import Group, Pattern


@dataclass(frozen=True)
class PreviewElement:
    """One element of the pending-pattern preview shown while selecting."""
    kind: Literal["word", "phrase", "and"]
    text: str


def compile_pattern(groups: Iterable[Group], name: str) -> Pattern:
    """Build a pattern that matches when every group matches.

    Each group becomes one clause: its literal source span anchored with word
    boundaries at the outer ends. The name is stored as given.
    """
    resolved = tuple(groups)
    if not resolved:
        raise EmptySelectionError("Select at least one word to build a pattern")
    if not name or not name.strip():
        raise EmptyNameError("Pattern name must not be empty")
    return Pattern(name=name, groups=resolved)


def preview_groups(groups: Iterable[Group]) -> list[PreviewElement]:
    """Describe groups as word/phrase elements joined by AND markers."""
    elements: list[PreviewElement] = []
    for group in groups:
        if elements:
            elements.append(PreviewElement(kind="and", text="AND"))
        kind = "phrase" if group.is_phrase else "word"
        elements.append(PreviewElement(kind=kind, text=group.literal))
    return elements
