"""
pdf/text_cleaner.py — drobne operacje na tekście wyciągniętym z PDF.

  - podział na linie (\\r\\n, \\r, \\n)
  - zwijanie białych znaków w treści pozycji
  - usuwanie adnotacji "(参考資料)"
  - normalizacja pełnoszerokościowych liter pozycji (Ａ–Ｘ → A–X)
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

_WHITESPACE_RE = re.compile(r"\s+")

_REFERENCE_MARK_RE = re.compile(r"[（(]参考資料[）)]")

# Zamknięty alfabet 24 liter pozycji: pełnoszerokościowe → ASCII.
_FULLWIDTH_ITEM_LETTERS: dict[str, str] = {
    chr(ord("Ａ") + i): chr(ord("A") + i) for i in range(24)
}


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def split_lines(text: str) -> list[str]:
    return _LINE_BREAK_RE.split(text)


def clean_text(text: str) -> str:
    """Zwija ciągi białych znaków do pojedynczej spacji i przycina."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def strip_reference_marks(line: str) -> str:
    return _REFERENCE_MARK_RE.sub("", line)


def normalize_item_letter(letter: str) -> str:
    """
    "Ａ" → "A", "A" → "A".

    Litery spoza alfabetu pozycji zwracane są bez zmian (segmenter sam
    odrzuca nieznane klucze).
    """
    return _FULLWIDTH_ITEM_LETTERS.get(letter, letter)
