"""
summary — skróty pozycji i składanie podsumowania licencji.

Publiczne API:
  match_rules(text, rules)                    -> str | None
  resolve_short(key, text, config)            -> str
  resolve_all(raw_items, config)              -> list[ClauseResult]
  compose_lines(results, selection, config)   -> list[str]
  compose_summary(results, selection, config) -> str
  summarize(parsed, config, selection)        -> str
  summarize_items(raw_items, config, sel.)    -> str
  rederive(entry, config, selection)          -> str
"""

from .engine import (
    match_rules,
    resolve_short,
    resolve_all,
    UNKNOWN,
    NOTES_NONE,
    NOTES_PRESENT,
    NOTES_NONE_PHRASES,
)
from .composer import compose_lines, compose_summary
from .pipeline import summarize, summarize_items, rederive

__all__ = [
    "match_rules",
    "resolve_short",
    "resolve_all",
    "UNKNOWN",
    "NOTES_NONE",
    "NOTES_PRESENT",
    "NOTES_NONE_PHRASES",
    "compose_lines",
    "compose_summary",
    "summarize",
    "summarize_items",
    "rederive",
]
