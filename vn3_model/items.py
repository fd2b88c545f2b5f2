"""
vn3_model/items.py — rejestr 24 pozycji licencji VN3 (A–X).

Kolejność pozycji jest jawna (ITEM_KEYS) i steruje zarówno segmentacją,
jak i kolejnością linii w podsumowaniu.

Grupy:
  AB  — podmiot użytkowania
  CE  — publikacja w serwisach online
  FH  — ekspresja wrażliwa
  IL  — obróbka / modyfikacje
  MN  — redystrybucja
  OR  — media i produkty
  SU  — twórczość pochodna
  V, W, X — pozycje pojedyncze (kredyt, przeniesienie praw, uwagi)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ClauseDefinition:
    key: str                    # "A".."X"
    group: str                  # np. "AB"
    human_label: str            # np. "A. 個人による利用"
    default_output_label: str   # etykieta linii w podsumowaniu (domyślnie litera)


def _d(key: str, group: str, label: str) -> ClauseDefinition:
    return ClauseDefinition(
        key=key,
        group=group,
        human_label=f"{key}. {label}",
        default_output_label=key,
    )


ITEMS: tuple[ClauseDefinition, ...] = (
    # A-B: 利用主体
    _d("A", "AB", "個人による利用"),
    _d("B", "AB", "法人による利用"),
    # C-E: オンラインサービスへのアップロード
    _d("C", "CE", "ソーシャルコミュニケーションプラットフォームへの利用"),
    _d("D", "CE", "オンラインゲームプラットフォームへの利用"),
    _d("E", "CE", "コンテンツ共有プラットフォームへの利用"),
    # F-H: センシティブな表現
    _d("F", "FH", "性的表現での利用"),
    _d("G", "FH", "暴力を伴う表現での利用"),
    _d("H", "FH", "政治活動・宗教活動での利用"),
    # I-L: 加工
    _d("I", "IL", "加工・調整"),
    _d("J", "IL", "改変"),
    _d("K", "IL", "他のデータとの改変・結合"),
    _d("L", "IL", "調整・改変の外部委託"),
    # M-N: 再配布
    _d("M", "MN", "再配布"),
    _d("N", "MN", "改変したデータの配布"),
    # O-R: メディア・プロダクト利用
    _d("O", "OR", "映像作品・配信・放送への利用"),
    _d("P", "OR", "出版物・電子出版物への利用"),
    _d("Q", "OR", "有体物（グッズ）への利用"),
    _d("R", "OR", "製品開発等のためのソフトウェアへの組み込み"),
    # S-U: 二次創作
    _d("S", "SU", "キャラクターや意匠を利用したアバターやモデルの作成"),
    _d("T", "SU", "コスプレ衣装の作成"),
    _d("U", "SU", "既存のキャラクターや意匠を利用した二次的著作物の作成"),
    # その他
    _d("V", "V", "クレジット表記"),
    _d("W", "W", "権利義務の譲渡等"),
    _d("X", "X", "特記事項"),
)

ITEM_KEYS: tuple[str, ...] = tuple(item.key for item in ITEMS)

ITEMS_BY_KEY: dict[str, ClauseDefinition] = {item.key: item for item in ITEMS}

# Grupy w kolejności pierwszego wystąpienia w rejestrze.
GROUPS: tuple[str, ...] = tuple(dict.fromkeys(item.group for item in ITEMS))

# Zarezerwowana grupa reguł ogólnych (sprawdzana jako ostatnia).
COMMON_GROUP = "common"

# Pozycja "特記事項": silnik reguł obsługuje ją osobno.
NOTES_KEY = "X"

# Etykiety scalonych linii grup.
GROUP_LABELS: dict[str, str] = {
    "AB": "利用主体",
    "CE": "アップロード",
    "FH": "センシティブ",
    "IL": "加工",
    "MN": "再配布",
    "OR": "メディア",
    "SU": "二次創作",
    "V":  "クレジット",
    "W":  "権利譲渡",
    "X":  "特記",
}

# Opisowe tytuły tabel reguł (listowanie / edycja).
GROUP_TITLES: dict[str, str] = {
    COMMON_GROUP: "共通ルール（優先度低）",
    "AB": "A-B 利用主体",
    "CE": "C-E アップロード",
    "FH": "F-H センシティブ",
    "IL": "I-L 加工",
    "MN": "M-N 再配布",
    "OR": "O-R メディア・プロダクト",
    "SU": "S-U 二次創作",
    "V":  "V クレジット",
    "W":  "W 権利譲渡",
}


def group_keys(group: str) -> list[str]:
    """Klucze pozycji należących do grupy, w kolejności rejestru."""
    return [item.key for item in ITEMS if item.group == group]


def group_label(group: str) -> str:
    return GROUP_LABELS.get(group, group)


def empty_items() -> dict[str, str]:
    """Świeży słownik RawClauseText: 24 wpisy, wszystkie puste."""
    return {key: "" for key in ITEM_KEYS}
