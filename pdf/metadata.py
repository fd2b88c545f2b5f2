"""pdf/metadata.py — tytuł licencji i posiadacz praw z pełnego tekstu."""

from __future__ import annotations

from pdf.section_patterns import (
    DEFAULT_TITLE,
    RIGHTS_HOLDER_RULES,
    TITLE_RULES,
    UNKNOWN_RIGHTS_HOLDER,
    first_match,
)


def extract_rights_holder(text: str) -> str:
    """Najpierw wpis "権利者：××", potem "Copyright: ××"."""
    return first_match(RIGHTS_HOLDER_RULES, text) or UNKNOWN_RIGHTS_HOLDER


def extract_title(text: str) -> str:
    """
    1. Samodzielna, krótka (< 50 znaków) linia kończąca się na "利用規約".
    2. Tytuł z preambuły "(参考資料)○○利用規約による許諾範囲の簡易一覧".
    """
    return first_match(TITLE_RULES, text) or DEFAULT_TITLE
