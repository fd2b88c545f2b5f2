"""
pdf/segmenter.py — podział tekstu licencji na 24 pozycje (A–X).

Architektura:
  pełny tekst → _find_region() (od "2. 利用条件" / "個別条件")
  → linie → automat dwustanowy (idle / collecting)
  → RawClauseText {klucz: tekst}

Treść pozycji kończy się na jednym z sygnałów:
  - kolejna litera pozycji ("B.", "Ｃ．" …)
  - stopka "上記の利用の許可には…"
  - ogólna granica sekcji ("(2)", "3.")
  - nagłówek części wspólnej "利用規約" (koniec analizy)
  - koniec tekstu

Uwaga: granica sekcji "cyfra + kropka" może wyzwolić się na treści pozycji
zaczynającej się od liczby. To znane ograniczenie heurystyki.
"""

from __future__ import annotations

import logging

from pdf.section_patterns import (
    FOOTER_PREFIX,
    ITEM_KEY_RE,
    REGION_START_PATTERNS,
    SECTION_BOUNDARY_RE,
    TERMS_HEADER_RE,
)
from pdf.text_cleaner import (
    clean_text,
    normalize_item_letter,
    split_lines,
    strip_reference_marks,
)
from vn3_model.items import ITEMS_BY_KEY, empty_items

logger = logging.getLogger(__name__)


def extract_items(full_text: str) -> dict[str, str]:
    """
    Zwraca RawClauseText: dokładnie 24 wpisy; "" = pozycja nieznaleziona.

    Późniejsze wystąpienie tej samej litery nadpisuje wcześniejsze.
    """
    items = empty_items()
    current_key: str | None = None
    buffer: list[str] = []

    def _flush() -> None:
        nonlocal current_key, buffer
        if current_key is not None:
            items[current_key] = clean_text(" ".join(buffer))
        current_key = None
        buffer = []

    for line in split_lines(_find_region(full_text)):
        trimmed = strip_reference_marks(line).strip()
        if not trimmed:
            continue

        if TERMS_HEADER_RE.match(trimmed):
            break

        key_match = ITEM_KEY_RE.match(trimmed)
        if key_match:
            _flush()
            key = normalize_item_letter(key_match.group(1))
            if key in ITEMS_BY_KEY:
                current_key = key
                body = trimmed[key_match.end():]
                buffer = [body] if body else []
            continue

        if current_key is None:
            continue

        if trimmed.startswith(FOOTER_PREFIX) or SECTION_BOUNDARY_RE.match(trimmed):
            _flush()
            continue

        buffer.append(trimmed)

    _flush()

    logger.debug("Znaleziono %d/%d pozycji", sum(1 for v in items.values() if v), len(items))
    return items


def _find_region(full_text: str) -> str:
    """Tekst od nagłówka części z warunkami; cały tekst, gdy brak nagłówka."""
    for pattern in REGION_START_PATTERNS:
        m = pattern.search(full_text)
        if m:
            logger.debug("Początek warunków: '%s' (offset %d)", pattern.pattern, m.start())
            return full_text[m.start():]
    logger.debug("Brak nagłówka warunków — analiza całego tekstu")
    return full_text
