from __future__ import annotations

"""Selection model behavior tests."""

import pytest

from src.topics.errors import InvalidTokenError
from src.topics.selection import SelectionModel


def test_select_toggles_without_duplicates(sample_text: str) -> None:
    model = SelectionModel(sample_text)

    assert model.select(1) is True
    assert model.select(1) is False
    assert model.selected == []
    model.select(1)
    assert model.selected == [1]


def test_groups_merge_adjacent_tokens(sample_text: str) -> None:
    model = SelectionModel(sample_text)
    for index in (3, 1, 2, 7):
        model.select(index)

    groups = model.groups()

    assert [group.literal for group in groups] == ["quick brown fox", "lazy"]
    assert [group.kind for group in groups] == ["phrase", "term"]


def test_groups_ignore_click_order(sample_text: str) -> None:
    first = SelectionModel(sample_text)
    second = SelectionModel(sample_text)
    for index in (1, 2, 5):
        first.select(index)
    for index in (5, 2, 1):
        second.select(index)

    assert first.groups() == second.groups()
    assert first.selected != second.selected


def test_phrase_keeps_source_separators() -> None:
    model = SelectionModel("state-of-the-art, really")
    for index in range(4):
        model.select(index)

    (group,) = model.groups()

    assert group.literal == "state-of-the-art"
    assert group.separators == ("-", "-", "-")


def test_empty_selection_has_no_groups(sample_text: str) -> None:
    assert SelectionModel(sample_text).groups() == []


def test_load_text_invalidates_selection(sample_text: str) -> None:
    model = SelectionModel(sample_text)
    model.select(0)

    model.load_text("another text")

    assert model.selected == []
    assert [token.text for token in model.tokens] == ["another", "text"]


def test_select_rejects_unknown_index(sample_text: str) -> None:
    model = SelectionModel(sample_text)

    with pytest.raises(InvalidTokenError):
        model.select(42)


def test_select_at_uses_whole_words(sample_text: str) -> None:
    model = SelectionModel(sample_text)

    assert model.select_at(6) is True
    assert model.select_at(3) is None
    assert [group.literal for group in model.groups()] == ["quick"]


def test_is_selected_tracks_toggles(sample_text: str) -> None:
    model = SelectionModel(sample_text)

    assert model.is_selected(4) is False
    model.select(4)
    assert model.is_selected(4) is True
    model.select(4)
    assert model.is_selected(4) is False
