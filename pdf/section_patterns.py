"""
pdf/section_patterns.py — tabele wzorców dla tekstu licencji VN3.

Dwa rodzaje wpisów:
  - TextRule        : reguła ekstrakcji metadanych (regex + funkcja wyciągająca),
                      testowane w kolejności; pierwsza pasująca wygrywa
  - stałe regex     : granice sekcji używane przez segmenter pozycji

TextRule.per_line=True oznacza, że regex jest dopasowywany do każdej
przyciętej linii osobno (zamiast do całego tekstu).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from pdf.text_cleaner import split_lines


@dataclass(frozen=True, slots=True)
class TextRule:
    name: str
    regex: re.Pattern[str]
    # Zwraca wartość albo None (kandydat odrzucony → szukamy dalej).
    extract: Callable[[re.Match[str]], str | None]
    per_line: bool = False

    def find(self, text: str) -> str | None:
        if self.per_line:
            for line in split_lines(text):
                stripped = line.strip()
                if not stripped:
                    continue
                m = self.regex.search(stripped)
                if m:
                    value = self.extract(m)
                    if value is not None:
                        return value
            return None
        for m in self.regex.finditer(text):
            value = self.extract(m)
            if value is not None:
                return value
        return None


def first_match(rules: Iterable[TextRule], text: str) -> str | None:
    """Wartość pierwszej reguły, która coś znalazła; None gdy żadna."""
    for rule in rules:
        value = rule.find(text)
        if value is not None:
            return value
    return None


def _p(pattern: str, flags: int = 0) -> re.Pattern[str]:
    return re.compile(pattern, flags | re.UNICODE)


def _g(group: int = 1) -> Callable[[re.Match[str]], str | None]:
    """Wyciąga grupę i przycina białe znaki; pusta wartość = brak."""
    def _extract(m: re.Match[str]) -> str | None:
        value = m.group(group).strip()
        return value or None
    return _extract


def _short_line(m: re.Match[str]) -> str | None:
    # Długie linie to raczej treść akapitu niż tytuł.
    value = m.group()
    return value if len(value) < 50 else None


# ---------------------------------------------------------------------------
# Metadane
# ---------------------------------------------------------------------------

RIGHTS_HOLDER_RULES: list[TextRule] = [
    TextRule(
        name="rights-holder-label",
        regex=_p(r"権利者\s*[:：]\s*([^\n\r]+)"),
        extract=_g(1),
    ),
    TextRule(
        name="copyright",
        regex=_p(r"Copyright\s*[:：]?\s*([^\n\r]+)", re.IGNORECASE),
        extract=_g(1),
    ),
]

TITLE_RULES: list[TextRule] = [
    # Samodzielna linia "○○利用規約", bez prefiksu (参考資料)
    TextRule(
        name="standalone-title",
        regex=_p(r"^(?![（(]参考資料[）)]).*利用規約$"),
        extract=_short_line,
        per_line=True,
    ),
    # "(参考資料)○○利用規約による許諾範囲の簡易一覧"
    TextRule(
        name="reference-preamble",
        regex=_p(r"[（(]参考資料[）)](.*利用規約)による許諾範囲の簡易一覧"),
        extract=_g(1),
    ),
]

UNKNOWN_RIGHTS_HOLDER = "不明な権利者"
DEFAULT_TITLE = "利用規約"


# ---------------------------------------------------------------------------
# Segmentacja pozycji
# ---------------------------------------------------------------------------

# Początek części z warunkami szczegółowymi; próbowane w kolejności.
REGION_START_PATTERNS: list[re.Pattern[str]] = [
    _p(r"2\.\s*利用条件"),
    _p(r"個別条件"),
]

# "A." / "Ａ．" na początku linii (pozycje A–X).
ITEM_KEY_RE = _p(r"^([A-XＡ-Ｘ])[\.．]\s*")

# Numery tylko z cyfr ASCII; "１．" czy "（１）" to zwykła treść pozycji.

# Nagłówek wspólnej części "利用規約": koniec analizy.
TERMS_HEADER_RE = _p(r"^([0-9]+[\.．]?\s*)?利用規約$")

# Ogólna granica sekcji: "(2)", "（2）", "3.", "3．"
SECTION_BOUNDARY_RE = _p(r"^(\([0-9]+\)|（[0-9]+）|[0-9]+[\.．])")

# Stała stopka zamykająca listę pozycji.
FOOTER_PREFIX = "上記の利用の許可には"
