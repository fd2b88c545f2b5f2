"""
vn3_model — struktury danych narzędzia vn3sum.

Użycie:
  from vn3_model import ITEMS, Configuration, SelectionState, ...

Moduły:
  items     — ClauseDefinition, rejestr 24 pozycji, grupy i ich etykiety
  config    — MappingRule, Configuration, reguły domyślne
  documents — TextFragment, LogicalLine, ParsedLicense
  results   — ClauseResult, SelectionState, HistoryEntry
  errors    — Vn3Error, DecodeFailure, NetworkFailure, AccessDenied
  schema    — schemat JSON pliku konfiguracji
"""

from .items import (
    ClauseDefinition,
    ITEMS,
    ITEM_KEYS,
    ITEMS_BY_KEY,
    GROUPS,
    COMMON_GROUP,
    NOTES_KEY,
    GROUP_LABELS,
    GROUP_TITLES,
    group_keys,
    group_label,
    empty_items,
)
from .config import (
    MappingRule,
    Configuration,
    DEFAULT_MAPPINGS,
    DEFAULT_MERGE,
    default_config,
)
from .documents import (
    TextFragment,
    LogicalLine,
    PageFragments,
    ParsedLicense,
)
from .results import (
    ClauseResult,
    SelectionState,
    HistoryEntry,
)
from .errors import (
    Vn3Error,
    DecodeFailure,
    NetworkFailure,
    AccessDenied,
)
from .schema import CONFIG_SCHEMA, config_errors

__all__ = [
    # items
    "ClauseDefinition",
    "ITEMS",
    "ITEM_KEYS",
    "ITEMS_BY_KEY",
    "GROUPS",
    "COMMON_GROUP",
    "NOTES_KEY",
    "GROUP_LABELS",
    "GROUP_TITLES",
    "group_keys",
    "group_label",
    "empty_items",
    # config
    "MappingRule",
    "Configuration",
    "DEFAULT_MAPPINGS",
    "DEFAULT_MERGE",
    "default_config",
    # documents
    "TextFragment",
    "LogicalLine",
    "PageFragments",
    "ParsedLicense",
    # results
    "ClauseResult",
    "SelectionState",
    "HistoryEntry",
    # errors
    "Vn3Error",
    "DecodeFailure",
    "NetworkFailure",
    "AccessDenied",
    # schema
    "CONFIG_SCHEMA",
    "config_errors",
]
