"""
summary/pipeline.py — od sparsowanej licencji do tekstu podsumowania.

  summarize(parsed, config, selection)      -> str
  summarize_items(raw_items, config, sel.)  -> str
  rederive(entry, config, selection)        -> str
"""

from __future__ import annotations

import logging

from summary.composer import compose_summary
from summary.engine import resolve_all
from vn3_model.config import Configuration
from vn3_model.documents import ParsedLicense
from vn3_model.results import HistoryEntry, SelectionState

logger = logging.getLogger(__name__)


def summarize_items(
    raw_items: dict[str, str],
    config: Configuration,
    selection: SelectionState | None = None,
) -> str:
    selection = selection if selection is not None else SelectionState()
    return compose_summary(resolve_all(raw_items, config), selection, config)


def summarize(
    parsed: ParsedLicense,
    config: Configuration,
    selection: SelectionState | None = None,
) -> str:
    return summarize_items(parsed.raw_items, config, selection)


def rederive(
    entry: HistoryEntry,
    config: Configuration,
    selection: SelectionState | None = None,
) -> str:
    """
    Odtwarza podsumowanie wpisu historii wg bieżącej konfiguracji.

    Wpis bez zapisanych surowych pozycji zwraca zapamiętany tekst.
    """
    if entry.raw_items is None:
        logger.debug("Wpis %s bez raw_items — zwracam zapisany tekst", entry.timestamp)
        return entry.summary
    return summarize_items(entry.raw_items, config, selection)
