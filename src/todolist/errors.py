# src/todolist/errors.py

from __future__ import annotations


class TodoListError(Exception):
    """Base class for errors raised by the todolist package."""


class InvalidArgumentError(TodoListError, ValueError):
    """A caller passed an entry of the wrong shape (missing field, mismatched id, ...)."""


class FormatError(TodoListError, ValueError):
    """
    An import line could not be parsed into (date, title).

    Carries enough context to point at the offending line:
    - source: file path or "<lines>" for in-memory input
    - line_number: 1-based
    - line: raw content (trailing newline stripped)
    - reason: short human-readable cause
    """

    def __init__(self, *, source: str, line_number: int, line: str, reason: str) -> None:
        self.source = source
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"{source}:{line_number}: {reason}: {line!r}")
