"""Shared fixtures.

Stores under test never touch the project's ``expenses.db`` or S3: they
either read and write a plain dict, or a SQLite file inside ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import database
import storage
from database import init_db
from expense_store import ExpenseStore


class MemoryBackend:
    """Dict-backed stand-in for ``storage.load_text`` / ``storage.save_text``."""

    def __init__(self, blobs: dict[str, str] | None = None, fail_saves: bool = False) -> None:
        self.blobs = dict(blobs or {})
        self.fail_saves = fail_saves
        self.saves: list[tuple[str, str]] = []

    def load(self, key: str) -> str | None:
        return self.blobs.get(key)

    def save(self, key: str, text: str) -> bool:
        self.saves.append((key, text))
        if self.fail_saves:
            return False
        self.blobs[key] = text
        return True


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def make_store(backend: MemoryBackend):
    def _make(**kwargs) -> ExpenseStore:
        kwargs.setdefault("loader", backend.load)
        kwargs.setdefault("saver", backend.save)
        return ExpenseStore(**kwargs)

    return _make


@pytest.fixture
def sqlite_storage(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point ``storage`` and ``init_db`` at a throwaway SQLite database."""

    engine = create_engine(
        f"sqlite:///{tmp_path / 'expenses.db'}", connect_args={"check_same_thread": False}
    )
    init_db(bind=engine)
    monkeypatch.setattr(storage, "SessionLocal", sessionmaker(bind=engine))
    monkeypatch.setattr(database, "engine", engine)
    monkeypatch.setattr(storage, "S3_BUCKET", None)
    yield storage
    engine.dispose()
