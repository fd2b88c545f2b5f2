"""
vn3_model/results.py — wyniki dopasowania, wybór pozycji i wpisy historii.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable

from .items import ITEM_KEYS, ITEMS_BY_KEY


@dataclass(slots=True)
class ClauseResult:
    key: str
    short: str      # nigdy puste: skrót, ucięty tekst albo "（不明）"
    raw: str


class SelectionState:
    """
    Zbiór pozycji uwzględnianych w podsumowaniu (domyślnie wszystkie).

    Stan lokalny procesu — nie jest utrwalany.
    """

    __slots__ = ("_keys",)

    def __init__(self, keys: Iterable[str] | None = None) -> None:
        self._keys: set[str] = set(ITEM_KEYS) if keys is None else {_check_key(k) for k in keys}

    def is_selected(self, key: str) -> bool:
        return key in self._keys

    def include(self, key: str) -> None:
        self._keys.add(_check_key(key))

    def exclude(self, key: str) -> None:
        self._keys.discard(_check_key(key))

    def toggle(self, key: str) -> bool:
        """Przełącza pozycję; zwraca nowy stan (True = wybrana)."""
        if self.is_selected(key):
            self.exclude(key)
            return False
        self.include(key)
        return True

    def select_all(self) -> None:
        self._keys = set(ITEM_KEYS)

    def clear(self) -> None:
        self._keys = set()

    def keys(self) -> list[str]:
        """Wybrane klucze w kolejności rejestru."""
        return [k for k in ITEM_KEYS if k in self._keys]

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)


def _check_key(key: str) -> str:
    if key not in ITEMS_BY_KEY:
        raise ValueError(f"Nieznany klucz pozycji: '{key}'")
    return key


@dataclass(slots=True)
class HistoryEntry:
    """
    Zapisane podsumowanie.

    raw_items (opcjonalnie) pozwala odtworzyć podsumowanie przy zmienionej
    konfiguracji.
    """
    timestamp: str
    summary: str
    title: str
    rights_holder: str
    raw_items: dict[str, str] | None = field(default=None)

    @classmethod
    def now(
        cls,
        summary: str,
        title: str,
        rights_holder: str,
        raw_items: dict[str, str] | None = None,
    ) -> "HistoryEntry":
        return cls(
            timestamp=datetime.now().isoformat(timespec="seconds"),
            summary=summary,
            title=title,
            rights_holder=rights_holder,
            raw_items=dict(raw_items) if raw_items is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "timestamp": self.timestamp,
            "summary": self.summary,
            "title": self.title,
            "rights_holder": self.rights_holder,
        }
        if self.raw_items is not None:
            data["raw_items"] = dict(self.raw_items)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HistoryEntry":
        raw = data.get("raw_items")
        return cls(
            timestamp=str(data.get("timestamp", "")),
            summary=str(data.get("summary", "")),
            title=str(data.get("title", "")),
            rights_holder=str(data.get("rights_holder", "")),
            raw_items={str(k): str(v) for k, v in raw.items()} if isinstance(raw, dict) else None,
        )
