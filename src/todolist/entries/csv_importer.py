# src/todolist/entries/csv_importer.py

"""
Bulk loader: build an EntryStore from "YYYY/MM/DD,Title" lines.

The format is deliberately not real CSV:
- exactly one comma per line (date field, title field)
- no header, no quoting or escaping
- a trailing "\n" or "\r\n" is stripped from each line
- date parts are ordered year/month/day

Loading is all-or-nothing: the first bad line raises FormatError and no
store is produced.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from collections.abc import Iterable
from pathlib import Path

from ..errors import FormatError
from .entry_models import NewEntry
from .entry_store import EntryStore

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_date(date_field: str) -> dt.date:
    parts = date_field.split("/")
    if len(parts) != 3:
        raise ValueError(f"date must have 3 '/'-separated parts, got {len(parts)}")

    for part in parts:
        if not _INT_RE.fullmatch(part):
            raise ValueError(f"date part {part!r} is not an integer")

    year, month, day = (int(p) for p in parts)
    try:
        return dt.date(year, month, day)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"invalid calendar date: {e}") from e


def parse_line(line: str, line_number: int = 1, *, source: str = "<lines>") -> NewEntry:
    line = line.rstrip("\r\n")

    fields = line.split(",")
    if len(fields) != 2:
        raise FormatError(
            source=source,
            line_number=line_number,
            line=line,
            reason=f"expected 2 comma-separated fields, got {len(fields)}",
        )

    date_field, title = fields
    try:
        date = _parse_date(date_field)
    except ValueError as e:
        raise FormatError(source=source, line_number=line_number, line=line, reason=str(e)) from e

    return NewEntry(date=date, title=title)


def parse_lines(lines: Iterable[str], *, source: str = "<lines>") -> list[NewEntry]:
    return [parse_line(line, n, source=source) for n, line in enumerate(lines, start=1)]


def load_lines(lines: Iterable[str], *, source: str = "<lines>") -> EntryStore:
    return EntryStore.new(parse_lines(lines, source=source))


def load(path: str | Path, *, encoding: str = "utf-8") -> EntryStore:
    """
    Load a store from a text file.

    OSError from opening/reading propagates unchanged; the file is closed on
    every exit path.
    """
    path = Path(path)
    with path.open("r", encoding=encoding) as fh:
        new_entries = parse_lines(fh, source=str(path))

    store = EntryStore.new(new_entries)
    logger.info("Entries imported path=%s count=%s", path, len(store))
    return store
