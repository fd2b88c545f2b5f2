"""
pdf/parser.py — parsowanie licencji VN3 z PDF.

Architektura:
  bajty PDF → decode_pdf() → fragmenty per strona
  → reconstruct_pages() → linie logiczne
  → join_pages() → pełny tekst
  → extract_items() + extract_title() + extract_rights_holder()
  → ParsedLicense

Kluczowe funkcje publiczne:
  parse_pdf(path)            -> ParsedLicense
  parse_pdf_bytes(data)      -> ParsedLicense
  parse_fragments(pages)     -> ParsedLicense
  parse_text(full_text)      -> ParsedLicense
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from pdf.decoder import decode_pdf
from pdf.lines import join_pages, reconstruct_pages
from pdf.metadata import extract_rights_holder, extract_title
from pdf.segmenter import extract_items
from vn3_model.documents import PageFragments, ParsedLicense


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def parse_pdf(path: str | Path) -> ParsedLicense:
    """Parsuje plik PDF z dysku."""
    return parse_pdf_bytes(Path(path).read_bytes())


def parse_pdf_bytes(data: bytes) -> ParsedLicense:
    """
    Parsuje dokument PDF podany jako bajty.

    Raises:
        DecodeFailure: dane nie są poprawnym PDF (brak częściowego wyniku).
    """
    return parse_fragments(decode_pdf(data))


def parse_fragments(pages: Iterable[PageFragments]) -> ParsedLicense:
    """Parsuje fragmenty już zdekodowane (po jednej liście na stronę)."""
    return parse_text(join_pages(reconstruct_pages(pages)))


def parse_text(full_text: str) -> ParsedLicense:
    """Segmentacja i metadane z gotowego pełnego tekstu."""
    return ParsedLicense(
        raw_items=extract_items(full_text),
        title=extract_title(full_text),
        rights_holder=extract_rights_holder(full_text),
        full_text=full_text,
    )
