from __future__ import annotations

"""Shared pytest fixtures and test environment defaults."""

import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ["TOPICS_STORE"] = "memory"
os.environ.pop("TOPICS_MAX_TOPICS", None)
os.environ.setdefault("TOPICS_LOG_LEVEL", "WARNING")


@pytest.fixture
def sample_text() -> str:
    return "The quick brown fox jumps over the lazy dog."
