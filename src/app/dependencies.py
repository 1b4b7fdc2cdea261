from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from src.app.settings import settings
from src.store.base import TopicStore
from src.store.jsonfile import JsonFileTopicStore
from src.store.memory import InMemoryTopicStore
from src.store.sql import SQLTopicStore
from src.topics.errors import TopicStoreError
from src.topics.workbench import TopicWorkbench

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging using environment settings."""
    level_name = settings.log_level.strip().upper()
    level = getattr(logging, level_name, logging.INFO)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )
    logging.getLogger("src").setLevel(level)


@lru_cache
def get_store() -> TopicStore:
    return build_store()


@lru_cache
def get_workbench() -> TopicWorkbench:
    configure_logging()
    return TopicWorkbench(
        store=get_store(),
        max_snippets=settings.max_snippets,
        highlight_window=settings.highlight_window,
    )


def reset_store_cache() -> None:
    get_workbench.cache_clear()
    get_store.cache_clear()


def build_store() -> TopicStore:
    backend = settings.store_backend
    if backend == "memory":
        return InMemoryTopicStore(max_topics=settings.max_topics)
    if backend == "file":
        return JsonFileTopicStore(settings.store_path)
    if backend == "sql":
        if not settings.db_uri:
            raise TopicStoreError("TOPICS_DB_URI must be set for the sql store")
        if settings.db_uri.startswith("sqlite:///"):
            Path(settings.db_uri[len("sqlite:///"):]).parent.mkdir(parents=True, exist_ok=True)
        return SQLTopicStore(settings.db_uri)
    raise TopicStoreError(f"Unsupported topic store: {backend}")
