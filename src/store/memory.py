from __future__ import annotations

"""In-memory topic store for local testing and single sessions."""

import logging
from dataclasses import dataclass, field

from src.store.base import build_topic
from src.topics.errors import StoreWriteError
from src.topics.types import Pattern, Topic

logger = logging.getLogger(__name__)


@dataclass
class InMemoryTopicStore:
    """Keep topics in a list, optionally capped at ``max_topics`` entries."""
    max_topics: int | None = None
    topics: list[Topic] = field(default_factory=list)

    def save(self, pattern: Pattern) -> Topic:
        """Append a new topic unless the quota is exhausted."""
        if self.max_topics is not None and len(self.topics) >= self.max_topics:
            raise StoreWriteError(f"Topic quota of {self.max_topics} reached")
        topic = build_topic(pattern)
        self.topics = [*self.topics, topic]
        logger.info("topic_saved", extra={"topic_id": topic.id, "backend": "memory"})
        return topic

    def list_topics(self) -> list[Topic]:
        return list(self.topics)

    def get(self, topic_id: str) -> Topic | None:
        for topic in self.topics:
            if topic.id == topic_id:
                return topic
        return None

    def delete(self, topic_id: str) -> bool:
        """Remove a topic by id; unknown ids are ignored."""
        kept = [topic for topic in self.topics if topic.id != topic_id]
        removed = len(kept) != len(self.topics)
        self.topics = kept
        if removed:
            logger.info("topic_deleted", extra={"topic_id": topic_id, "backend": "memory"})
        return removed
