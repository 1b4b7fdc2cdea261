from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    store_backend_raw: str = os.getenv("TOPICS_STORE", "memory")
    store_path_raw: str = os.getenv("TOPICS_STORE_PATH", str(PROJECT_ROOT / "data" / "topics.json"))
    db_uri_raw: str = os.getenv("TOPICS_DB_URI", f"sqlite:///{PROJECT_ROOT / 'data' / 'topics.db'}")
    max_topics_raw: int = _int_env("TOPICS_MAX_TOPICS", 0)
    log_level_raw: str = os.getenv("TOPICS_LOG_LEVEL", "INFO")
    highlight_window: int = _int_env("TOPICS_HIGHLIGHT_WINDOW", 80)
    max_snippets: int = _int_env("TOPICS_MAX_SNIPPETS", 3)

    @property
    def store_backend(self) -> str:
        return os.getenv("TOPICS_STORE", self.store_backend_raw).strip().lower()

    @property
    def store_path(self) -> Path:
        raw = os.getenv("TOPICS_STORE_PATH", self.store_path_raw).strip()
        return Path(raw).expanduser()

    @property
    def db_uri(self) -> str:
        return os.getenv("TOPICS_DB_URI", self.db_uri_raw).strip()

    @property
    def max_topics(self) -> int | None:
        value = _int_env("TOPICS_MAX_TOPICS", self.max_topics_raw)
        return value if value > 0 else None

    @property
    def log_level(self) -> str:
        return os.getenv("TOPICS_LOG_LEVEL", self.log_level_raw)


settings = Settings()
