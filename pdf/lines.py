"""
pdf/lines.py — odtwarzanie linii z pozycjonowanych fragmentów tekstu.

Fragmenty z dekodera są już w kolejności czytania, więc skok pozycji
pionowej powyżej progu traktujemy jako koniec linii, bez pełnej analizy
układu strony. Fragmenty w tej samej linii sklejane są bez separatora
(tekst japoński).
"""

from __future__ import annotations

import logging
from typing import Iterable

from vn3_model.documents import LogicalLine, PageFragments

logger = logging.getLogger(__name__)

# Różnica y (jednostki układu PDF), powyżej której zaczyna się nowa linia.
LINE_BREAK_THRESHOLD = 8.0


def reconstruct_page(fragments: PageFragments, page: int = 1) -> list[LogicalLine]:
    """Skleja fragmenty jednej strony w linie logiczne."""
    lines: list[LogicalLine] = []
    buffer: list[str] = []
    last_y: float | None = None

    for frag in fragments:
        if not frag.text.strip():
            continue
        if buffer and last_y is not None and abs(frag.y - last_y) > LINE_BREAK_THRESHOLD:
            lines.append(LogicalLine(text="".join(buffer), page=page))
            buffer = []
        buffer.append(frag.text)
        last_y = frag.y

    if buffer:
        lines.append(LogicalLine(text="".join(buffer), page=page))
    return lines


def reconstruct_pages(pages: Iterable[PageFragments]) -> list[list[LogicalLine]]:
    result = [reconstruct_page(frags, page=i) for i, frags in enumerate(pages, start=1)]
    logger.debug(
        "Odtworzono %d linii na %d stronach",
        sum(len(p) for p in result), len(result),
    )
    return result


def join_pages(pages: Iterable[list[LogicalLine]]) -> str:
    """
    Pełny tekst dokumentu: linie strony łączone "\\n", po każdej stronie
    pusta linia ("\\n\\n").
    """
    return "".join(
        "\n".join(line.text for line in lines) + "\n\n"
        for lines in pages
    )
