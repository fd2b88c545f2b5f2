"""Tests for summary.engine — rule matching for single items."""

from __future__ import annotations

from summary.engine import (
    FALLBACK_MAX_CHARS,
    NOTES_NONE,
    NOTES_PRESENT,
    UNKNOWN,
    match_rules,
    resolve_all,
    resolve_short,
)
from vn3_model import ITEM_KEYS, Configuration, MappingRule, default_config


class TestMatchRules:
    def test_first_matching_rule_wins(self) -> None:
        rules = [MappingRule("許可", "first"), MappingRule("許可します", "second")]
        assert match_rules("許可します。", rules) == "first"

    def test_empty_pattern_skipped(self) -> None:
        rules = [MappingRule("", "empty"), MappingRule("可", "ok")]
        assert match_rules("許可", rules) == "ok"

    def test_no_match(self) -> None:
        assert match_rules("abc", [MappingRule("x", "y")]) is None
        assert match_rules("abc", []) is None


class TestResolveShort:
    def test_group_rule(self) -> None:
        text = "個人による利用 営利・非営利の目的問わず利用を許可します。"
        assert resolve_short("A", text, default_config()) == "営利非営利OK"

    def test_group_rule_beats_common(self) -> None:
        # "許可します" jest też w regułach common
        text = "対象を限定しての公開を許可します。"
        assert resolve_short("E", text, default_config()) == "限定許可"

    def test_common_fallback(self) -> None:
        assert resolve_short("C", "許可します。", default_config()) == "OK"
        assert resolve_short("F", "許可しません。", default_config()) == "NG"

    def test_group_rules_do_not_leak_between_groups(self) -> None:
        text = "対象を限定しての公開を許可します。"
        assert resolve_short("A", text, default_config()) == "OK"

    def test_empty_text_is_unknown(self) -> None:
        assert resolve_short("B", "", default_config()) == UNKNOWN
        assert resolve_short("X", "", default_config()) == UNKNOWN

    def test_fallback_truncates(self) -> None:
        text = "あ" * 30
        short = resolve_short("W", text, default_config())
        assert short == "あ" * FALLBACK_MAX_CHARS + "..."

    def test_fallback_short_text_unchanged(self) -> None:
        assert resolve_short("W", "譲渡不可", default_config()) == "譲渡不可"

    def test_empty_config_uses_fallback(self) -> None:
        config = Configuration()
        assert resolve_short("C", "許可します。", config) == "許可します。"

    def test_notes_none(self) -> None:
        config = default_config()
        assert resolve_short("X", "特記事項：特になし", config) == NOTES_NONE
        assert resolve_short("X", "特記事項 なし", config) == NOTES_NONE
        assert resolve_short("X", "該当なし", config) == NOTES_NONE

    def test_notes_present(self) -> None:
        config = default_config()
        assert resolve_short("X", "特記事項：再配布の際は別途連絡", config) == NOTES_PRESENT

    def test_notes_ignore_rule_tables(self) -> None:
        config = default_config()
        config.mappings["common"].insert(0, MappingRule("連絡", "ZZZ"))
        assert resolve_short("X", "別途連絡", config) == NOTES_PRESENT


class TestResolveAll:
    def test_all_keys_in_registry_order(self) -> None:
        results = resolve_all({"A": "許可します"}, default_config())
        assert [r.key for r in results] == list(ITEM_KEYS)
        assert results[0].short == "OK"
        assert results[0].raw == "許可します"
        assert all(r.short for r in results)

    def test_deterministic(self) -> None:
        raw = {"A": "許可します", "M": "無償に限り許可します"}
        assert resolve_all(raw, default_config()) == resolve_all(raw, default_config())
