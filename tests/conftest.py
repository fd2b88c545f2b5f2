"""Wspólne fikstury testów vn3sum."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import fitz
import pytest

from storage import JsonFileStore

# Tekst licencji po odtworzeniu linii (jak z join_pages).
LICENSE_TEXT = "\n".join([
    "VN3ライセンス",
    "○○アバター利用規約",
    "権利者：山田太郎",
    "1. はじめに",
    "A. 前文の項目は対象外",
    "2. 利用条件",
    "(1)利用主体",
    "A. 個人による利用",
    "営利・非営利の目的問わず利用を許可します。",
    "B. 法人による利用",
    "権利者に個別に問い合わせて下さい。",
    "(2)オンラインサービスへのアップロード",
    "Ｃ．ソーシャルコミュニケーションプラットフォームへの利用 許可します。",
    "D. オンラインゲームプラットフォームへの利用",
    "許可します。",
    "E. コンテンツ共有プラットフォームへの利用",
    "(参考資料)対象を限定しての公開を許可します。",
    "上記の利用の許可には、本規約の遵守が必要です。",
    "F. 性的表現での利用",
    "許可しません。",
    "V. クレジット表記",
    "不要ですがあると嬉しいです。",
    "X. 特記事項",
    "特になし",
    "3. 利用規約",
    "A. 共通部分は解析しない",
]) + "\n\n"

LICENSE_SUMMARY = "\n".join([
    "利用主体：A:営利非営利OK B:要問合せ",
    "アップロード：C:OK D:OK E:限定許可",
    "センシティブ：F:NG G:（不明） H:（不明）",
    "加工：（不明）",
    "再配布：（不明）",
    "メディア：（不明）",
    "二次創作：（不明）",
    "V：不要(歓迎)",
    "W：（不明）",
    "X：なし",
])


@pytest.fixture
def license_text() -> str:
    return LICENSE_TEXT


@pytest.fixture
def license_summary() -> str:
    return LICENSE_SUMMARY


@pytest.fixture
def store(tmp_path: Path) -> JsonFileStore:
    return JsonFileStore(tmp_path / "store")


@pytest.fixture
def make_pdf() -> Callable[..., bytes]:
    """Buduje PDF z liniami ASCII (20 pt odstępu) powtórzonymi na każdej stronie."""
    def _make(*lines: str, pages: int = 1) -> bytes:
        doc = fitz.open()
        for _ in range(pages):
            page = doc.new_page()
            y = 72.0
            for text in lines:
                page.insert_text((72, y), text, fontsize=11)
                y += 20.0
        data = doc.tobytes()
        doc.close()
        return data
    return _make
