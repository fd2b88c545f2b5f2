"""Tests for vn3_model — item registry, configuration and selection."""

from __future__ import annotations

import pytest

from vn3_model import (
    DEFAULT_MAPPINGS,
    GROUPS,
    ITEM_KEYS,
    Configuration,
    HistoryEntry,
    MappingRule,
    SelectionState,
    config_errors,
    default_config,
    group_keys,
)


class TestRegistry:
    def test_24_items_in_order(self) -> None:
        assert "".join(ITEM_KEYS) == "ABCDEFGHIJKLMNOPQRSTUVWX"

    def test_groups(self) -> None:
        assert GROUPS == ("AB", "CE", "FH", "IL", "MN", "OR", "SU", "V", "W", "X")
        assert group_keys("OR") == ["O", "P", "Q", "R"]


class TestConfiguration:
    def test_default_is_independent_copy(self) -> None:
        config = default_config()
        config.mappings["V"].clear()
        config.groups["AB"] = False
        assert DEFAULT_MAPPINGS["V"]
        assert default_config().groups["AB"] is True

    def test_dict_round_trip(self) -> None:
        config = default_config()
        config.labels["A"] = "個人"
        config.prefix = "VN3"
        config.separator = " | "
        assert Configuration.from_dict(config.to_dict()) == config

    def test_missing_sections_take_defaults(self) -> None:
        config = Configuration.from_dict({"groups": {"AB": False}})
        assert config.groups == {"AB": False}
        assert config.mappings == DEFAULT_MAPPINGS
        assert config.labels == {}

    def test_empty_separator_becomes_newline(self) -> None:
        assert Configuration.from_dict({"separator": ""}).separator == "\n"

    def test_blank_labels_dropped(self) -> None:
        assert Configuration.from_dict({"labels": {"A": "", "B": "法人"}}).labels == {"B": "法人"}

    def test_rules_for_unknown_group(self) -> None:
        assert default_config().rules_for("nope") == []
        assert default_config().should_merge("V") is False

    def test_rule_from_dict(self) -> None:
        assert MappingRule.from_dict({"pattern": "a"}) == MappingRule("a", "")


class TestConfigSchema:
    def test_valid(self) -> None:
        assert config_errors(default_config().to_dict()) == []
        assert config_errors({}) == []

    def test_not_an_object(self) -> None:
        assert config_errors([1, 2])

    def test_error_paths(self) -> None:
        errors = config_errors({
            "groups": {"AB": "yes"},
            "mappings": {"V": [{"pattern": "x"}]},
        })
        assert any(e.startswith("/groups/AB:") for e in errors)
        assert any(e.startswith("/mappings/V/0:") for e in errors)


class TestSelectionState:
    def test_default_all(self) -> None:
        selection = SelectionState()
        assert len(selection) == 24
        assert "X" in selection

    def test_toggle_and_order(self) -> None:
        selection = SelectionState(["V", "A"])
        assert selection.keys() == ["A", "V"]
        assert selection.toggle("A") is False
        assert selection.toggle("B") is True
        assert selection.keys() == ["B", "V"]

    def test_clear_and_select_all(self) -> None:
        selection = SelectionState()
        selection.clear()
        assert selection.keys() == []
        selection.select_all()
        assert selection.keys() == list(ITEM_KEYS)

    def test_unknown_key(self) -> None:
        with pytest.raises(ValueError):
            SelectionState(["Z"])
        with pytest.raises(ValueError):
            SelectionState().include("a")


class TestHistoryEntry:
    def test_dict_without_raw_items(self) -> None:
        entry = HistoryEntry(timestamp="t", summary="s", title="T", rights_holder="R")
        assert "raw_items" not in entry.to_dict()
        assert HistoryEntry.from_dict(entry.to_dict()) == entry

    def test_now_copies_raw_items(self) -> None:
        raw = {"A": "x"}
        entry = HistoryEntry.now("s", "T", "R", raw_items=raw)
        raw["A"] = "changed"
        assert entry.raw_items == {"A": "x"}
        assert "T" in entry.timestamp
