"""Tests for pdf.lines — line reconstruction from positioned fragments."""

from __future__ import annotations

from pdf.lines import LINE_BREAK_THRESHOLD, join_pages, reconstruct_page, reconstruct_pages
from vn3_model import LogicalLine, TextFragment


def _frags(*items: tuple[str, float]) -> list[TextFragment]:
    return [TextFragment(text=t, y=y) for t, y in items]


class TestReconstructPage:
    def test_same_baseline_concatenated_without_separator(self) -> None:
        lines = reconstruct_page(_frags(("A.", 100.0), (" 個人", 100.5), ("による利用", 101.0)))
        assert [ln.text for ln in lines] == ["A. 個人による利用"]

    def test_vertical_jump_starts_new_line(self) -> None:
        lines = reconstruct_page(_frags(("一行目", 100.0), ("二行目", 120.0)))
        assert [ln.text for ln in lines] == ["一行目", "二行目"]

    def test_threshold_is_exclusive(self) -> None:
        at = reconstruct_page(_frags(("a", 100.0), ("b", 100.0 + LINE_BREAK_THRESHOLD)))
        above = reconstruct_page(_frags(("a", 100.0), ("b", 100.0 + LINE_BREAK_THRESHOLD + 0.1)))
        assert [ln.text for ln in at] == ["ab"]
        assert [ln.text for ln in above] == ["a", "b"]

    def test_blank_fragments_skipped_and_do_not_move_baseline(self) -> None:
        lines = reconstruct_page(_frags(("許可", 120.0), ("   ", 300.0), ("します", 121.0)))
        assert [ln.text for ln in lines] == ["許可します"]

    def test_direction_of_jump_irrelevant(self) -> None:
        lines = reconstruct_page(_frags(("下", 700.0), ("上", 680.0)))
        assert len(lines) == 2

    def test_empty_page(self) -> None:
        assert reconstruct_page([]) == []
        assert reconstruct_page(_frags((" ", 10.0), ("", 20.0))) == []

    def test_page_number_recorded(self) -> None:
        lines = reconstruct_page(_frags(("x", 1.0)), page=3)
        assert lines == [LogicalLine(text="x", page=3)]


class TestJoinPages:
    def test_pages_separated_by_blank_line(self) -> None:
        pages = reconstruct_pages([
            _frags(("l1", 10.0), ("l2", 30.0)),
            [],
            _frags(("l3", 10.0)),
        ])
        assert join_pages(pages) == "l1\nl2\n\n\n\nl3\n\n"

    def test_baseline_resets_between_pages(self) -> None:
        pages = reconstruct_pages([_frags(("a", 50.0)), _frags(("b", 50.0))])
        assert [[ln.text for ln in p] for p in pages] == [["a"], ["b"]]
        assert pages[1][0].page == 2
