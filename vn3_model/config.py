"""
vn3_model/config.py — konfiguracja skrótów i sposobu składania podsumowania.

Format JSON (slot "vn3_config"):
  {
    "prefix":    "",                                  # opcjonalna pierwsza linia
    "separator": "\\n",                               # łącznik linii
    "mappings":  {"AB": [{"pattern": ..., "short": ...}, ...], "common": [...]},
    "groups":    {"AB": true, ...},                   # scalanie grup
    "labels":    {"A": "個人", ...}                    # własne etykiety pozycji
  }

Reguły w obrębie grupy są uporządkowane; wygrywa pierwsza pasująca.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from .items import COMMON_GROUP


@dataclass(slots=True)
class MappingRule:
    pattern: str    # fragment tekstu (dopasowanie podciągu)
    short: str      # skrót wstawiany do podsumowania

    def to_dict(self) -> dict[str, str]:
        return {"pattern": self.pattern, "short": self.short}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MappingRule":
        return cls(pattern=str(data.get("pattern", "")), short=str(data.get("short", "")))


# ---------------------------------------------------------------------------
# Wartości domyślne
# ---------------------------------------------------------------------------

def _rules(*pairs: tuple[str, str]) -> list[MappingRule]:
    return [MappingRule(pattern=p, short=s) for p, s in pairs]


DEFAULT_MAPPINGS: dict[str, list[MappingRule]] = {
    COMMON_GROUP: _rules(
        ("権利者に個別に問い合わせて下さい", "要問合せ"),
        ("許可します", "OK"),
        ("許可しません", "NG"),
        ("禁止します", "NG"),
    ),
    "AB": _rules(
        ("営利・非営利の目的問わず利用を許可します", "営利非営利OK"),
        ("非営利および非営利有償目的での利用を許可します", "非営利有償OK"),
        ("非営利目的に限り許可します", "非営利のみOK"),
    ),
    "CE": _rules(
        ("対象を限定しての公開を許可します", "限定許可"),
    ),
    "FH": _rules(
        ("ただし棲み分けはおこなうこと", "要棲み分け"),
        ("ただし私的使用（プライベートな範囲での利用）については禁止しません", "私用のみOK"),
    ),
    "IL": _rules(
        ("ユーザー間で行うことを許可します", "ユーザー間のみOK"),
    ),
    "MN": _rules(
        ("無償に限り本利用規約に従わせることを条件に許可します", "無償・規約遵守条件"),
        ("無償に限りユーザー間で行うことを許可します", "無償・ユーザー間のみ"),
        ("本利用規約に従わせることを条件に許可します", "規約遵守条件"),
        ("無償に限り許可します", "無償のみ"),
        ("ユーザー間で行うことを許可します", "ユーザー間のみ"),
    ),
    "OR": _rules(
        ("オリジナルと異なることが分かる程度に改変した場合は許可します", "改変後利用OK(公式誤認対策)"),
    ),
    "SU": _rules(
        ("営利・非営利の目的問わず配布等（頒布、送信を含む）を許可します", "配布OK(営利可)"),
        ("非営利および非営利有償目的での配布等（頒布、送信を含む）を許可します", "配布OK(非営利有償)"),
        ("非営利目的での配布等（頒布、送信を含む）を許可します", "配布OK(非営利のみ)"),
        ("私的かつ本人のみによる利用に限り許可します", "私的利用のみ"),
        ("作成を許可しません", "作成NG"),
        ("配布等（頒布、送信を含む）を許可しません", "配布NG"),
        ("該当するデータではありません", "該当なし"),
    ),
    "V": _rules(
        ("不要ですがあると嬉しいです", "不要(歓迎)"),
        ("必要です", "必要"),
        ("不要です", "不要"),
    ),
    "W": [],
}

DEFAULT_MERGE: dict[str, bool] = {
    "AB": True,
    "CE": True,
    "FH": True,
    "IL": True,
    "MN": True,
    "OR": True,
    "SU": True,
}


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Configuration:
    """
    Ustawienia użytkownika.

    - mappings:  grupa → uporządkowana lista MappingRule (plus grupa "common")
    - groups:    grupa → czy scalać pozycje grupy w jedną linię
    - labels:    klucz pozycji → własna etykieta linii
    - prefix:    tekst pierwszej linii podsumowania ("" = brak)
    - separator: łącznik linii podsumowania
    """
    mappings: dict[str, list[MappingRule]] = field(default_factory=dict)
    groups: dict[str, bool] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)
    prefix: str = ""
    separator: str = "\n"

    def rules_for(self, group: str) -> list[MappingRule]:
        return self.mappings.get(group, [])

    def should_merge(self, group: str) -> bool:
        return bool(self.groups.get(group, False))

    def to_dict(self) -> dict[str, Any]:
        return {
            "prefix": self.prefix,
            "separator": self.separator,
            "mappings": {
                group: [r.to_dict() for r in rules]
                for group, rules in self.mappings.items()
            },
            "groups": dict(self.groups),
            "labels": dict(self.labels),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Configuration":
        """Buduje konfigurację z JSON; brakujące sekcje biorą wartości domyślne."""
        base = default_config()
        if "mappings" in data:
            base.mappings = {
                str(group): [MappingRule.from_dict(r) for r in rules or []]
                for group, rules in (data.get("mappings") or {}).items()
            }
        if "groups" in data:
            base.groups = {str(g): bool(v) for g, v in (data.get("groups") or {}).items()}
        if "labels" in data:
            base.labels = {str(k): str(v) for k, v in (data.get("labels") or {}).items() if v}
        if "prefix" in data:
            base.prefix = str(data.get("prefix") or "")
        if "separator" in data:
            base.separator = str(data.get("separator") or "\n")
        return base


def default_config() -> Configuration:
    return Configuration(
        mappings=copy.deepcopy(DEFAULT_MAPPINGS),
        groups=dict(DEFAULT_MERGE),
        labels={},
    )
