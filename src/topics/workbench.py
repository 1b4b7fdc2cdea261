from __future__ import annotations

"""Facade wiring selection, compilation, storage and matching for a UI shell."""

import logging
from dataclasses import dataclass, field
from typing import Any

from src.store.base import TopicStore
from src.topics.compiler import PreviewElement, compile_pattern, preview_groups
from src.topics.errors import (
    EmptyNameError,
    EmptySelectionError,
    InvalidTokenError,
    StoreReadError,
    StoreWriteError,
)
from src.topics.highlights import build_highlights
from src.topics.matcher import evaluate
from src.topics.selection import SelectionModel
from src.topics.types import MatchResult, Pattern, Token, Topic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionResult:
    """Outcome of one user action; failures carry a reason code and message."""
    ok: bool
    reason: str = "ok"
    detail: str | None = None
    value: Any = None


@dataclass(frozen=True)
class MatchReport:
    """Match result plus rendered snippets for a tested topic."""
    topic_id: str | None
    result: MatchResult
    highlights: list[str] = field(default_factory=list)


def _failure(reason: str, exc: Exception) -> ActionResult:
    return ActionResult(ok=False, reason=reason, detail=str(exc))


@dataclass
class TopicWorkbench:
    store: TopicStore
    selection: SelectionModel = field(default_factory=SelectionModel)
    max_snippets: int = 3
    highlight_window: int = 80

    def load_text(self, text: str) -> list[Token]:
        """Load a new sample text and return its tokens."""
        self.selection.load_text(text)
        return self.selection.tokens

    def toggle(self, index: int) -> ActionResult:
        try:
            selected = self.selection.select(index)
        except InvalidTokenError as exc:
            return _failure("invalid_token", exc)
        return ActionResult(ok=True, value=selected)

    def toggle_at(self, offset: int) -> ActionResult:
        selected = self.selection.select_at(offset)
        if selected is None:
            return ActionResult(ok=False, reason="no_word")
        return ActionResult(ok=True, value=selected)

    def preview(self) -> list[PreviewElement]:
        return preview_groups(self.selection.groups())

    def save_topic(self, name: str) -> ActionResult:
        """Compile the current selection and persist it as a topic."""
        try:
            pattern = compile_pattern(self.selection.groups(), name)
        except EmptySelectionError as exc:
            logger.warning("topic_save_rejected", extra={"reason": "empty_selection"})
            return _failure("empty_selection", exc)
        except EmptyNameError as exc:
            logger.warning("topic_save_rejected", extra={"reason": "empty_name"})
            return _failure("empty_name", exc)
        try:
            topic = self.store.save(pattern)
        except StoreWriteError as exc:
            logger.error("topic_save_failed", extra={"detail": str(exc)})
            return _failure("store_write_failed", exc)
        self.selection.clear()
        return ActionResult(ok=True, value=topic)

    def topics(self) -> ActionResult:
        try:
            return ActionResult(ok=True, value=self.store.list_topics())
        except StoreReadError as exc:
            logger.error("topic_list_failed", extra={"detail": str(exc)})
            return _failure("store_read_failed", exc)

    def delete_topic(self, topic_id: str) -> ActionResult:
        try:
            removed = self.store.delete(topic_id)
        except StoreWriteError as exc:
            logger.error("topic_delete_failed", extra={"topic_id": topic_id, "detail": str(exc)})
            return _failure("store_write_failed", exc)
        return ActionResult(ok=True, value=removed)

    def test_topic(self, topic_id: str, text: str) -> ActionResult:
        """Evaluate a saved topic against text and attach highlight snippets."""
        try:
            topic: Topic | None = self.store.get(topic_id)
        except StoreReadError as exc:
            logger.error("topic_lookup_failed", extra={"topic_id": topic_id, "detail": str(exc)})
            return _failure("store_read_failed", exc)
        if topic is None:
            return ActionResult(ok=False, reason="topic_not_found")
        report = self._report(topic.id, topic.pattern, text)
        return ActionResult(ok=True, value=report)

    def test_pattern(self, pattern: Pattern, text: str) -> MatchReport:
        return self._report(None, pattern, text)

    def _report(self, topic_id: str | None, pattern: Pattern, text: str) -> MatchReport:
        result = evaluate(pattern, text)
        highlights = build_highlights(
            text,
            result,
            max_snippets=self.max_snippets,
            window=self.highlight_window,
        )
        return MatchReport(topic_id=topic_id, result=result, highlights=highlights)
