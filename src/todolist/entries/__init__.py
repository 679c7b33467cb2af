"""
Entry subsystem.

Components:
- entry_models.py: data structures (NewEntry, Entry, EntryUpdater)
- entry_store.py: immutable in-memory store + query/update helpers
- csv_importer.py: "YYYY/MM/DD,Title" line parser and file loader
"""

from .csv_importer import load, load_lines, parse_line, parse_lines
from .entry_models import Entry, EntryUpdater, NewEntry
from .entry_store import EntryStore

__all__ = [
    "Entry",
    "EntryStore",
    "EntryUpdater",
    "NewEntry",
    "load",
    "load_lines",
    "parse_line",
    "parse_lines",
]
