# tests/conftest.py

from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path

import pytest

from todolist.config import Settings
from todolist.entries.entry_models import NewEntry
from todolist.entries.entry_store import EntryStore

SAMPLE_LINES = [
    "2018/12/19,Dentist",
    "2018/12/20,Shopping",
    "2018/12/19,Movies",
]


@pytest.fixture()
def sample_entries() -> list[NewEntry]:
    return [
        NewEntry(date=dt.date(2018, 12, 19), title="Dentist"),
        NewEntry(date=dt.date(2018, 12, 20), title="Shopping"),
        NewEntry(date=dt.date(2018, 12, 19), title="Movies"),
    ]


@pytest.fixture()
def sample_store(sample_entries: list[NewEntry]) -> EntryStore:
    return EntryStore.new(sample_entries)


@pytest.fixture()
def todos_file(tmp_path: Path) -> Path:
    path = tmp_path / "todos.csv"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings built directly rather than from the environment,
    to keep unit tests isolated and deterministic.
    """
    return Settings(
        app_name="todolist-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path / "data",
        import_path=None,
        import_encoding="utf-8",
    )


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
