"""Dated todo entries: an immutable in-memory store plus a text-file loader."""

from .entries import Entry, EntryStore, EntryUpdater, NewEntry, load, load_lines, parse_line, parse_lines
from .errors import FormatError, InvalidArgumentError, TodoListError

__all__ = [
    "Entry",
    "EntryStore",
    "EntryUpdater",
    "FormatError",
    "InvalidArgumentError",
    "NewEntry",
    "TodoListError",
    "load",
    "load_lines",
    "parse_line",
    "parse_lines",
]
