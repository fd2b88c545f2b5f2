"""
summary/engine.py — dopasowanie surowego tekstu pozycji do skrótu.

Kolejność (pierwsze trafienie wygrywa, bez punktacji):
  1. pusty tekst                → "（不明）"
  2. pozycja X (特記事項)        → "なし" / "あり 要確認" (bez tabel reguł)
  3. reguły grupy pozycji       → short pierwszej reguły, której pattern
                                  jest podciągiem tekstu
  4. reguły "common"            → j.w.
  5. fallback                   → tekst ucięty do 20 znaków + "..."
"""

from __future__ import annotations

import re
from typing import Iterable

from vn3_model.config import Configuration, MappingRule
from vn3_model.items import COMMON_GROUP, ITEM_KEYS, ITEMS_BY_KEY, NOTES_KEY
from vn3_model.results import ClauseResult

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

UNKNOWN = "（不明）"

NOTES_NONE = "なし"
NOTES_PRESENT = "あり 要確認"

# Odpowiedzi oznaczające brak uwag (porównanie dosłowne, po zdjęciu etykiety).
NOTES_NONE_PHRASES: frozenset[str] = frozenset({
    "なし",
    "無し",
    "特になし",
    "特に無し",
    "ありません",
    "特にありません",
    "該当なし",
})

_NOTES_LABEL_RE = re.compile(r"^特記事項\s*[:：]?")

FALLBACK_MAX_CHARS = 20
FALLBACK_ELLIPSIS = "..."


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def match_rules(text: str, rules: Iterable[MappingRule]) -> str | None:
    """Short pierwszej reguły, której pattern występuje w tekście."""
    for rule in rules:
        if rule.pattern and rule.pattern in text:
            return rule.short
    return None


def resolve_short(key: str, text: str, config: Configuration) -> str:
    """Skrót dla jednej pozycji. Nigdy nie zwraca pustego napisu."""
    if not text:
        return UNKNOWN

    if key == NOTES_KEY:
        return _resolve_notes(text)

    group = ITEMS_BY_KEY[key].group
    short = match_rules(text, config.rules_for(group))
    if not short:
        short = match_rules(text, config.rules_for(COMMON_GROUP))
    if not short:
        short = _truncate(text)
    return short


def resolve_all(raw_items: dict[str, str], config: Configuration) -> list[ClauseResult]:
    """ClauseResult dla wszystkich 24 pozycji, w kolejności rejestru."""
    return [
        ClauseResult(
            key=key,
            short=resolve_short(key, raw_items.get(key, ""), config),
            raw=raw_items.get(key, ""),
        )
        for key in ITEM_KEYS
    ]


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _resolve_notes(text: str) -> str:
    body = _NOTES_LABEL_RE.sub("", text.strip(), count=1).strip()
    return NOTES_NONE if body in NOTES_NONE_PHRASES else NOTES_PRESENT


def _truncate(text: str) -> str:
    if len(text) > FALLBACK_MAX_CHARS:
        return text[:FALLBACK_MAX_CHARS] + FALLBACK_ELLIPSIS
    return text
