from __future__ import annotations

"""Topic store interface shared by all backings."""

import uuid
from typing import Protocol

from src.topics.errors import StoreWriteError
from src.topics.types import Pattern, Topic


class TopicStore(Protocol):
    """Persisted collection of topics keyed by id, in insertion order."""
    def save(self, pattern: Pattern) -> Topic:
        ...

    def list_topics(self) -> list[Topic]:
        ...

    def get(self, topic_id: str) -> Topic | None:
        ...

    def delete(self, topic_id: str) -> bool:
        ...


def new_topic_id() -> str:
    return str(uuid.uuid4())


def build_topic(pattern: Pattern) -> Topic:
    """Wrap a pattern in a topic with a fresh id; patterns need at least one group."""
    if not pattern.groups:
        raise StoreWriteError(f"Pattern {pattern.name!r} has no groups to persist")
    return Topic(id=new_topic_id(), name=pattern.name, pattern=pattern)
