"""
summary/composer.py — składanie podsumowania z wyników pozycji.

Dla każdej pozycji w kolejności rejestru (pomijając niewybrane i już
obsłużone):
  - grupa scalana (więcej niż 1 pozycja w rejestrze, włączone scalanie,
    co najmniej jedna wybrana pozycja):
        "<etykieta grupy>：<wartość>"            gdy wszystkie wartości równe
        "<etykieta grupy>：A:v1 B:v2 …"          w przeciwnym razie
    cała grupa (także niewybrane pozycje) oznaczana jako obsłużona
  - w pozostałych przypadkach:
        "<etykieta pozycji>：<skrót>"

Linie łączone są separatorem z konfiguracji (domyślnie "\\n"); niepusty
prefix trafia na początek jako osobna linia.
"""

from __future__ import annotations

from typing import Iterable

from vn3_model.config import Configuration
from vn3_model.items import ITEM_KEYS, ITEMS_BY_KEY, group_keys, group_label
from vn3_model.results import ClauseResult, SelectionState

SEPARATOR = "："


def compose_lines(
    results: Iterable[ClauseResult],
    selection: SelectionState,
    config: Configuration,
) -> list[str]:
    shorts = {r.key: r.short for r in results}
    lines: list[str] = []
    processed: set[str] = set()

    for key in ITEM_KEYS:
        if key in processed or not selection.is_selected(key):
            continue

        group = ITEMS_BY_KEY[key].group
        members = group_keys(group)
        active = [k for k in members if selection.is_selected(k)]

        if config.should_merge(group) and len(members) > 1 and active:
            values = [shorts[k] for k in active]
            if all(v == values[0] for v in values):
                body = values[0]
            else:
                body = " ".join(f"{k}:{shorts[k]}" for k in active)
            lines.append(f"{group_label(group)}{SEPARATOR}{body}")
            processed.update(members)
        else:
            lines.append(f"{_item_label(key, config)}{SEPARATOR}{shorts[key]}")
            processed.add(key)

    return lines


def compose_summary(
    results: Iterable[ClauseResult],
    selection: SelectionState,
    config: Configuration,
) -> str:
    lines = compose_lines(results, selection, config)
    if config.prefix:
        lines.insert(0, config.prefix)
    return config.separator.join(lines)


def _item_label(key: str, config: Configuration) -> str:
    return config.labels.get(key) or ITEMS_BY_KEY[key].default_output_label
