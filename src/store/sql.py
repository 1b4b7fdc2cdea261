from __future__ import annotations

"""SQL topic store backed by SQLAlchemy Core."""

import json
import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError
from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
)
from sqlalchemy.exc import SQLAlchemyError

from src.store.base import build_topic
from src.store.schemas import topic_from_record, topic_to_record
from src.topics.errors import StoreReadError, StoreWriteError
from src.topics.types import Pattern, Topic

logger = logging.getLogger(__name__)


class SQLTopicStore:
    """Store topics in a SQL database, one row per topic."""
    def __init__(self, connection_uri: str) -> None:
        """Initialize the topic store and ensure tables exist."""
        try:
            self._engine = create_engine(connection_uri)
            self._metadata = MetaData()
            self._table = Table(
                "topics",
                self._metadata,
                Column("seq", Integer, primary_key=True, autoincrement=True),
                Column("id", String(36), nullable=False, unique=True),
                Column("name", Text, nullable=False),
                Column("pattern_json", Text, nullable=False),
                Column("created_at", DateTime(timezone=True), nullable=False),
            )
            self._metadata.create_all(self._engine)
        except SQLAlchemyError as exc:
            raise StoreWriteError("Cannot initialize the topic database") from exc

    def save(self, pattern: Pattern) -> Topic:
        """Insert a new topic row inside its own transaction."""
        topic = build_topic(pattern)
        payload = self._serialize(topic, datetime.now(timezone.utc))
        try:
            with self._engine.begin() as conn:
                conn.execute(self._table.insert().values(**payload))
        except SQLAlchemyError as exc:
            logger.error(
                "topic_store_write_failed",
                extra={"topic_id": topic.id, "detail": type(exc).__name__},
            )
            raise StoreWriteError("Cannot save topic") from exc
        logger.info("topic_saved", extra={"topic_id": topic.id, "backend": "sql"})
        return topic

    def list_topics(self) -> list[Topic]:
        rows = self._select()
        topics: list[Topic] = []
        for row in rows:
            topic = self._deserialize(row)
            if topic is not None:
                topics.append(topic)
        return topics

    def get(self, topic_id: str) -> Topic | None:
        rows = self._select(topic_id)
        if not rows:
            return None
        return self._deserialize(rows[0])

    def delete(self, topic_id: str) -> bool:
        """Delete a topic row; unknown ids are ignored."""
        try:
            with self._engine.begin() as conn:
                result = conn.execute(self._table.delete().where(self._table.c.id == topic_id))
        except SQLAlchemyError as exc:
            logger.error(
                "topic_store_write_failed",
                extra={"topic_id": topic_id, "detail": type(exc).__name__},
            )
            raise StoreWriteError("Cannot delete topic") from exc
        removed = bool(result.rowcount)
        if removed:
            logger.info("topic_deleted", extra={"topic_id": topic_id, "backend": "sql"})
        return removed

    def _select(self, topic_id: str | None = None) -> list[Any]:
        query = self._table.select().order_by(self._table.c.seq)
        if topic_id is not None:
            query = query.where(self._table.c.id == topic_id)
        try:
            with self._engine.connect() as conn:
                return list(conn.execute(query).mappings())
        except SQLAlchemyError as exc:
            raise StoreReadError("Cannot read topics") from exc

    def _serialize(self, topic: Topic, created_at: datetime) -> dict[str, Any]:
        """Prepare a topic row for insertion."""
        record = topic_to_record(topic)
        return {
            "id": record["id"],
            "name": record["name"],
            "pattern_json": json.dumps(record["groups"], ensure_ascii=False),
            "created_at": created_at,
        }

    def _deserialize(self, row: Any) -> Topic | None:
        try:
            groups = json.loads(row["pattern_json"])
            return topic_from_record({"id": row["id"], "name": row["name"], "groups": groups})
        except (json.JSONDecodeError, ValidationError):
            logger.warning("topic_record_invalid", extra={"topic_id": row["id"]})
            return None
