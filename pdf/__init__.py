"""
pdf — odczyt licencji VN3 z dokumentów PDF.

Publiczne API:
  parse_pdf(path)           -> ParsedLicense
  parse_pdf_bytes(data)     -> ParsedLicense
  parse_fragments(pages)    -> ParsedLicense
  parse_text(full_text)     -> ParsedLicense
  decode_pdf(data)          -> list[PageFragments]
  reconstruct_page(frags)   -> list[LogicalLine]
  extract_items(full_text)  -> dict[str, str]
  extract_title(full_text)  -> str
  extract_rights_holder(full_text) -> str
"""

from .decoder import decode_pdf
from .lines import LINE_BREAK_THRESHOLD, join_pages, reconstruct_page, reconstruct_pages
from .metadata import extract_rights_holder, extract_title
from .parser import parse_fragments, parse_pdf, parse_pdf_bytes, parse_text
from .segmenter import extract_items

__all__ = [
    "decode_pdf",
    "LINE_BREAK_THRESHOLD",
    "join_pages",
    "reconstruct_page",
    "reconstruct_pages",
    "extract_rights_holder",
    "extract_title",
    "parse_fragments",
    "parse_pdf",
    "parse_pdf_bytes",
    "parse_text",
    "extract_items",
]
