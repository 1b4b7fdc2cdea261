from __future__ import annotations

"""JSON file topic store with atomic, durable writes."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from src.store.base import build_topic
from src.store.schemas import topic_from_record, topic_to_record
from src.topics.errors import StoreReadError, StoreWriteError
from src.topics.types import Pattern, Topic

logger = logging.getLogger(__name__)


class JsonFileTopicStore:
    """Store topics as a JSON array in a single file.

    Every call re-reads the file, so other sessions sharing the same path
    observe each other's completed writes.
    """
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def save(self, pattern: Pattern) -> Topic:
        """Append a topic and persist it before returning."""
        topic = build_topic(pattern)
        items = self._read_for_write()
        items.append(topic_to_record(topic))
        self._write_items(items)
        logger.info("topic_saved", extra={"topic_id": topic.id, "backend": "file"})
        return topic

    def list_topics(self) -> list[Topic]:
        topics: list[Topic] = []
        for item in self._read_items():
            try:
                topics.append(topic_from_record(item))
            except ValidationError as exc:
                logger.warning(
                    "topic_record_invalid",
                    extra={"path": str(self._path), "errors": exc.error_count()},
                )
        return topics

    def get(self, topic_id: str) -> Topic | None:
        for topic in self.list_topics():
            if topic.id == topic_id:
                return topic
        return None

    def delete(self, topic_id: str) -> bool:
        """Remove a topic by id; unknown ids leave the file untouched."""
        items = self._read_for_write()
        kept = [item for item in items if not (isinstance(item, dict) and item.get("id") == topic_id)]
        if len(kept) == len(items):
            return False
        self._write_items(kept)
        logger.info("topic_deleted", extra={"topic_id": topic_id, "backend": "file"})
        return True

    def _read_items(self) -> list[Any]:
        """Load raw records; a missing or empty file is an empty store."""
        try:
            if not self._path.exists():
                return []
            raw = self._path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise StoreReadError(f"Cannot read topics from {self._path}") from exc
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StoreReadError(f"Topic file {self._path} is not valid JSON") from exc
        if not isinstance(data, list):
            raise StoreReadError(f"Topic file {self._path} must contain a JSON array")
        return data

    def _read_for_write(self) -> list[Any]:
        try:
            return self._read_items()
        except StoreReadError as exc:
            raise StoreWriteError(str(exc)) from exc

    def _write_items(self, items: list[Any]) -> None:
        """Replace the file atomically via a uniquely named, synced temporary file."""
        payload = json.dumps(items, ensure_ascii=False, indent=2)
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
            _fsync_directory(self._path.parent)
        except OSError as exc:
            logger.error(
                "topic_store_write_failed",
                extra={"path": str(self._path), "detail": type(exc).__name__},
            )
            raise StoreWriteError(f"Cannot write topics to {self._path}") from exc
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)


def _fsync_directory(directory: Path) -> None:
    """Flush the directory entry so a completed replace survives a crash."""
    if os.name != "posix":
        return
    fd = os.open(directory, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)
