"""
storage/history.py — historia podsumowań (najnowsze pierwsze, max 50).

Każde dodanie zapisuje całą listę w slocie "vn3_history".
"""

from __future__ import annotations

from storage.store import HISTORY_SLOT, KeyValueStore
from vn3_model.results import HistoryEntry

MAX_HISTORY = 50


class HistoryManager:
    def __init__(self, store: KeyValueStore, limit: int = MAX_HISTORY) -> None:
        self._store = store
        self.limit = limit
        self._entries = self._load()

    def _load(self) -> list[HistoryEntry]:
        data = self._store.load(HISTORY_SLOT)
        if not isinstance(data, list):
            return []
        return [HistoryEntry.from_dict(d) for d in data if isinstance(d, dict)][: self.limit]

    @property
    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def get(self, index: int) -> HistoryEntry:
        if not 0 <= index < len(self._entries):
            raise ValueError(f"Brak wpisu historii o indeksie {index}")
        return self._entries[index]

    def add(self, entry: HistoryEntry) -> None:
        self._entries.insert(0, entry)
        del self._entries[self.limit:]
        self._store.save(HISTORY_SLOT, [e.to_dict() for e in self._entries])

    def clear(self) -> None:
        self._entries = []
        self._store.delete(HISTORY_SLOT)

    def __len__(self) -> int:
        return len(self._entries)
