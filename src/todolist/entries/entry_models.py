# src/todolist/entries/entry_models.py

from __future__ import annotations

import datetime as dt
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ..errors import InvalidArgumentError


def _check_date(value: Any) -> dt.date:
    # datetime is a subclass of date but carries a time component.
    if not isinstance(value, dt.date) or isinstance(value, dt.datetime):
        raise InvalidArgumentError(f"date must be a datetime.date, got {type(value).__name__}")
    return value


def _check_title(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"title must be a str, got {type(value).__name__}")
    return value


def _require(raw: Mapping[str, Any], key: str) -> Any:
    if key not in raw:
        raise InvalidArgumentError(f"{key} is required")
    return raw[key]


@dataclass(frozen=True, slots=True)
class NewEntry:
    """An entry that has not been added to a store yet (no id)."""

    date: dt.date
    title: str

    def __post_init__(self) -> None:
        _check_date(self.date)
        _check_title(self.title)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> NewEntry:
        return cls(date=_require(raw, "date"), title=_require(raw, "title"))

    def with_id(self, entry_id: int) -> Entry:
        return Entry(id=entry_id, date=self.date, title=self.title)


@dataclass(frozen=True, slots=True)
class Entry:
    id: int
    date: dt.date
    title: str

    def __post_init__(self) -> None:
        # bool is an int subclass; reject it as an id.
        if not isinstance(self.id, int) or isinstance(self.id, bool) or self.id < 1:
            raise InvalidArgumentError(f"id must be a positive int, got {self.id!r}")
        _check_date(self.date)
        _check_title(self.title)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> Entry:
        return cls(
            id=_require(raw, "id"),
            date=_require(raw, "date"),
            title=_require(raw, "title"),
        )


EntryUpdater = Callable[[Entry], Entry]
