"""Tests for pdf.decoder and PDF-level parsing."""

from __future__ import annotations

from typing import Callable

import pytest

from pdf import parse_pdf, parse_pdf_bytes
from pdf.decoder import decode_pdf
from pdf.lines import reconstruct_pages
from vn3_model import DecodeFailure


class TestDecodePdf:
    def test_fragments_have_text_and_position(self, make_pdf: Callable[..., bytes]) -> None:
        pages = decode_pdf(make_pdf("Hello", "World"))
        assert len(pages) == 1
        texts = [f.text for f in pages[0]]
        assert "Hello" in texts and "World" in texts
        hello = next(f for f in pages[0] if f.text == "Hello")
        world = next(f for f in pages[0] if f.text == "World")
        assert world.y - hello.y == pytest.approx(20.0, abs=1.0)
        assert hello.page == 1

    def test_lines_reconstructed(self, make_pdf: Callable[..., bytes]) -> None:
        pages = reconstruct_pages(decode_pdf(make_pdf("Hello", "World")))
        assert [line.text for line in pages[0]] == ["Hello", "World"]

    def test_multiple_pages(self, make_pdf: Callable[..., bytes]) -> None:
        pages = decode_pdf(make_pdf("Page", pages=2))
        assert len(pages) == 2
        assert pages[1][0].page == 2

    def test_garbage_bytes(self) -> None:
        with pytest.raises(DecodeFailure):
            decode_pdf(b"this is not a pdf at all")

    def test_empty_bytes(self) -> None:
        with pytest.raises(DecodeFailure) as exc_info:
            decode_pdf(b"")
        assert "PDF" in exc_info.value.message


class TestParsePdf:
    def test_parse_bytes(self, make_pdf: Callable[..., bytes]) -> None:
        parsed = parse_pdf_bytes(make_pdf("Copyright: ACME Inc.", "A. allowed", "B. denied"))
        assert parsed.rights_holder == "ACME Inc."
        assert parsed.title == "利用規約"
        assert parsed.raw_items["A"] == "allowed"
        assert parsed.raw_items["B"] == "denied"
        assert parsed.raw_items["C"] == ""

    def test_parse_file(self, tmp_path, make_pdf: Callable[..., bytes]) -> None:
        path = tmp_path / "license.pdf"
        path.write_bytes(make_pdf("V. credit"))
        assert parse_pdf(path).raw_items["V"] == "credit"
