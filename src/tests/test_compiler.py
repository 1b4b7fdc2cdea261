from __future__ import annotations

"""Pattern compilation tests."""

import re

import pytest

from src.topics.compiler import compile_pattern, preview_groups
from src.topics.errors import EmptyNameError, EmptySelectionError
from src.topics.selection import SelectionModel


def _groups(text: str, *indices: int):
    model = SelectionModel(text)
    for index in indices:
        model.select(index)
    return model.groups()


def test_compile_builds_phrase_and_term_clauses(sample_text: str) -> None:
    pattern = compile_pattern(_groups(sample_text, 1, 2, 7), "animals")

    assert pattern.name == "animals"
    assert [group.kind for group in pattern.groups] == ["phrase", "term"]
    assert pattern.expression.clauses == (r"\bquick\ brown\b", r"\blazy\b")
    assert str(pattern.expression) == r"\bquick\ brown\b AND \blazy\b"


def test_compile_is_deterministic(sample_text: str) -> None:
    groups = _groups(sample_text, 3, 1)

    assert compile_pattern(groups, "fox") == compile_pattern(groups, "fox")


def test_compile_escapes_literal_punctuation() -> None:
    pattern = compile_pattern(_groups("price (USD) 3.50 total", 2, 3), "price")

    assert pattern.groups[0].literal == "3.50"
    assert re.search(pattern.expression.clauses[0], "was 3.50 now") is not None
    assert re.search(pattern.expression.clauses[0], "was 3x50 now") is None


def test_compile_rejects_empty_selection() -> None:
    with pytest.raises(EmptySelectionError):
        compile_pattern([], "nothing")


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_compile_rejects_blank_name(sample_text: str, name: str) -> None:
    with pytest.raises(EmptyNameError):
        compile_pattern(_groups(sample_text, 1), name)


def test_compile_stores_name_as_given(sample_text: str) -> None:
    pattern = compile_pattern(_groups(sample_text, 1), "  Speed  ")

    assert pattern.name == "  Speed  "


def test_combined_regex_requires_every_clause(sample_text: str) -> None:
    regex = compile_pattern(_groups(sample_text, 1, 3), "quick fox").expression.to_regex()

    assert re.search(regex, "a fox\nwas quick") is not None
    assert re.search(regex, "only quick here") is None


def test_preview_lists_groups_with_and_markers(sample_text: str) -> None:
    elements = preview_groups(_groups(sample_text, 7, 1, 2))

    assert [(element.kind, element.text) for element in elements] == [
        ("phrase", "quick brown"),
        ("and", "AND"),
        ("word", "lazy"),
    ]
