"""
vn3_model/documents.py — struktury tekstu wyciąganego z PDF.

TextFragment to pojedynczy pozycjonowany fragment z dekodera PDF; LogicalLine
to fragmenty jednej linii sklejone wg pozycji pionowej. ParsedLicense jest
wynikiem całego etapu parsowania dokumentu.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias


@dataclass(slots=True)
class TextFragment:
    text: str
    y: float            # pozycja pionowa (linia bazowa)
    x: float = 0.0
    page: int = 1       # 1-based


@dataclass(slots=True)
class LogicalLine:
    text: str
    page: int = 1


# Fragmenty jednej strony w kolejności zwróconej przez dekoder.
PageFragments: TypeAlias = list[TextFragment]


@dataclass(slots=True)
class ParsedLicense:
    raw_items: dict[str, str]       # klucz pozycji → surowy tekst ("" = nie znaleziono)
    title: str
    rights_holder: str
    full_text: str = field(default="", repr=False)
