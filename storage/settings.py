"""
storage/settings.py — konfiguracja użytkownika z zapisem po każdej zmianie.

SettingsManager trzyma bieżącą Configuration i utrwala ją w całości
(slot "vn3_config") po każdej mutacji. Brak zapisanej konfiguracji =
wartości domyślne z rejestru.

Błędne klucze pozycji, grupy i indeksy reguł → ValueError.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from storage.store import CONFIG_SLOT, KeyValueStore
from vn3_model.config import Configuration, MappingRule, default_config
from vn3_model.items import COMMON_GROUP, GROUPS, ITEMS_BY_KEY

logger = logging.getLogger(__name__)

# Grupy, dla których można definiować reguły (X ma logikę na sztywno).
RULE_GROUPS: tuple[str, ...] = (COMMON_GROUP,) + tuple(g for g in GROUPS if g != "X")


class SettingsManager:
    def __init__(self, store: KeyValueStore) -> None:
        self._store = store
        self.config = self._load()

    # ------------------------------------------------------------------
    # Wczytywanie / zapis
    # ------------------------------------------------------------------

    def _load(self) -> Configuration:
        data = self._store.load(CONFIG_SLOT)
        if not isinstance(data, dict):
            logger.debug("Brak zapisanej konfiguracji — wartości domyślne")
            return default_config()
        return Configuration.from_dict(data)

    def save(self) -> None:
        self._store.save(CONFIG_SLOT, self.config.to_dict())

    def reset(self) -> Configuration:
        return self.replace(default_config())

    def replace(self, config: Configuration) -> Configuration:
        self.config = config
        self.save()
        return self.config

    # ------------------------------------------------------------------
    # Scalanie grup i etykiety
    # ------------------------------------------------------------------

    def set_merge(self, group: str, merge: bool) -> None:
        _check_group(group, GROUPS)
        self.config.groups[group] = merge
        self.save()

    def set_label(self, key: str, label: str) -> None:
        _check_key(key)
        label = label.strip()
        if label:
            self.config.labels[key] = label
        else:
            self.config.labels.pop(key, None)
        self.save()

    def clear_label(self, key: str) -> None:
        self.set_label(key, "")

    def set_prefix(self, prefix: str) -> None:
        self.config.prefix = prefix
        self.save()

    def set_separator(self, separator: str) -> None:
        if not separator:
            raise ValueError("Separator nie może być pusty")
        self.config.separator = separator
        self.save()

    # ------------------------------------------------------------------
    # Reguły skrótów
    # ------------------------------------------------------------------

    def add_rule(self, group: str, pattern: str, short: str, position: int | None = None) -> MappingRule:
        """Dodaje regułę na koniec listy grupy albo na pozycję (0-based)."""
        _check_group(group, RULE_GROUPS)
        pattern, short = pattern.strip(), short.strip()
        if not pattern or not short:
            raise ValueError("Reguła wymaga niepustego wzorca i skrótu")
        rule = MappingRule(pattern=pattern, short=short)
        rules = self.config.mappings.setdefault(group, [])
        if position is None:
            rules.append(rule)
        else:
            if not 0 <= position <= len(rules):
                raise ValueError(f"Pozycja {position} poza zakresem 0..{len(rules)}")
            rules.insert(position, rule)
        self.save()
        return rule

    def remove_rule(self, group: str, index: int) -> MappingRule:
        _check_group(group, RULE_GROUPS)
        rules = self.config.mappings.get(group, [])
        if not 0 <= index < len(rules):
            raise ValueError(f"Grupa '{group}' nie ma reguły o indeksie {index}")
        rule = rules.pop(index)
        self.save()
        return rule

    def replace_rules(self, mappings: Mapping[str, Iterable[MappingRule]]) -> None:
        """
        Zapis z edytora reguł: reguły z pustym wzorcem lub skrótem są
        pomijane, grupa bez żadnej reguły zachowuje dotychczasową listę,
        grupy spoza `mappings` pozostają bez zmian.
        """
        updated: dict[str, list[MappingRule]] = {}
        for group, rules in mappings.items():
            _check_group(group, RULE_GROUPS)
            kept = [
                MappingRule(pattern=r.pattern.strip(), short=r.short.strip())
                for r in rules
                if r.pattern.strip() and r.short.strip()
            ]
            if kept:
                updated[group] = kept
        self.config.mappings = {**self.config.mappings, **updated}
        self.save()


def _check_group(group: str, allowed: Iterable[str]) -> None:
    if group not in allowed:
        raise ValueError(f"Nieznana grupa: '{group}'")


def _check_key(key: str) -> None:
    if key not in ITEMS_BY_KEY:
        raise ValueError(f"Nieznany klucz pozycji: '{key}'")
