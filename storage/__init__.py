"""
storage — trwały stan vn3sum: konfiguracja i historia.

Publiczne API:
  open_store()                  -> KeyValueStore
  JsonFileStore(directory)
  PostgresStore(connect)
  SettingsManager(store)        .config, set_merge(), set_label(), add_rule(), ...
  HistoryManager(store)         .entries, add(), clear(), get()
"""

from .store import (
    CONFIG_SLOT,
    HISTORY_SLOT,
    KeyValueStore,
    JsonFileStore,
    PostgresStore,
    open_store,
)
from .settings import RULE_GROUPS, SettingsManager
from .history import MAX_HISTORY, HistoryManager

__all__ = [
    "CONFIG_SLOT",
    "HISTORY_SLOT",
    "KeyValueStore",
    "JsonFileStore",
    "PostgresStore",
    "open_store",
    "RULE_GROUPS",
    "SettingsManager",
    "MAX_HISTORY",
    "HistoryManager",
]
