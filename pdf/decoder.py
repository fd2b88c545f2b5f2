"""
pdf/decoder.py — dekodowanie PDF do pozycjonowanych fragmentów tekstu.

Architektura:
  bajty PDF → fitz.open(stream=...) → strony → page.get_text("dict")
  → bloki → linie → spany → TextFragment(text, x, y) w kolejności dekodera

y to współrzędna linii bazowej spanu (origin[1]); dla odtwarzania linii
liczy się tylko różnica y między kolejnymi fragmentami.
"""

from __future__ import annotations

import logging

import fitz  # PyMuPDF

from vn3_model.documents import PageFragments, TextFragment
from vn3_model.errors import DecodeFailure

logger = logging.getLogger(__name__)


def decode_pdf(data: bytes) -> list[PageFragments]:
    """
    Zwraca fragmenty tekstu dla każdej strony.

    Raises:
        DecodeFailure: dane nie są poprawnym dokumentem PDF.
    """
    if not data:
        raise DecodeFailure()
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except (RuntimeError, ValueError) as exc:
        # fitz.FileDataError / EmptyFileError dziedziczą po RuntimeError
        logger.debug("PyMuPDF nie otworzył dokumentu: %s", exc)
        raise DecodeFailure() from exc

    try:
        if not doc.is_pdf or doc.page_count == 0:
            raise DecodeFailure()
        pages = [_page_fragments(page) for page in doc]
    except (RuntimeError, ValueError) as exc:
        raise DecodeFailure() from exc
    finally:
        doc.close()

    logger.debug(
        "Zdekodowano %d stron, %d fragmentów",
        len(pages), sum(len(p) for p in pages),
    )
    return pages


def _page_fragments(page: fitz.Page) -> PageFragments:
    page_no = page.number + 1  # 1-based
    page_dict = page.get_text("dict", flags=fitz.TEXT_PRESERVE_WHITESPACE)
    fragments: PageFragments = []
    for block in page_dict.get("blocks", []):
        if block.get("type") != 0:
            continue
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                text = span.get("text", "")
                if not text:
                    continue
                x, y = span.get("origin", (span["bbox"][0], span["bbox"][3]))
                fragments.append(TextFragment(text=text, x=float(x), y=float(y), page=page_no))
    return fragments
