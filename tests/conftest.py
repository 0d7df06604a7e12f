"""
Global test configuration for festplanner.

Provides catalog builders, an in-memory store and a CLI environment that
points settings at temporary files.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Ensure the project src directory is importable without relying on external environment.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))
TESTS_PATH = PROJECT_ROOT / "tests"
if str(TESTS_PATH) not in sys.path:
    sys.path.insert(0, str(TESTS_PATH))

from builders import sample_catalog_document  # noqa: E402
from festplanner.infra import db as db_module  # noqa: E402
from festplanner.infra.settings import settings  # noqa: E402
from festplanner.runtime.storage import InMemoryKeyValueStore  # noqa: E402


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def memory_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "films.json"
    path.write_text(json.dumps(sample_catalog_document()), encoding="utf-8")
    return path


@pytest.fixture
def cli_env(monkeypatch, tmp_path: Path, catalog_file: Path) -> Path:
    """Point settings at a temporary catalog and SQLite state file."""
    db_path = tmp_path / "state" / "planner.db"
    monkeypatch.setattr(settings, "catalog_path", str(catalog_file))
    monkeypatch.setattr(settings, "trailers_path", None)
    monkeypatch.setattr(settings, "database_url", f"sqlite:///{db_path}")
    monkeypatch.setattr(settings, "hide_industry", True)
    monkeypatch.setattr(settings, "log_level", "ERROR")
    yield tmp_path
    db_module.dispose_engines()
