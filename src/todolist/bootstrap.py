# src/todolist/bootstrap.py

"""
Composition root for a hosting application:
- loads settings once (injectable for tests),
- configures logging from settings,
- builds the initial EntryStore (empty, or imported from settings.import_path).
"""

from __future__ import annotations

import logging

from .config import Settings, get_settings
from .entries.csv_importer import load
from .entries.entry_store import EntryStore
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)


def configure_logging(*, settings: Settings | None = None) -> None:
    if settings is None:
        settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(console_level, int):
        console_level = logging.INFO

    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )


def create_store(*, settings: Settings | None = None) -> EntryStore:
    """
    Create the initial store from settings.

    Import errors (FormatError, OSError) propagate: a half-loaded store is
    never returned.
    """
    if settings is None:
        settings = get_settings()

    if settings.import_path is None:
        logger.info("%s: starting with an empty store", settings.app_name)
        return EntryStore.new()

    logger.info("%s: importing entries from %s", settings.app_name, settings.import_path)
    return load(settings.import_path, encoding=settings.import_encoding)
