"""Otwieranie magazynu ustawień i historii dla komend CLI."""

from __future__ import annotations

from rich.console import Console

from storage import HistoryManager, SettingsManager, open_store

console = Console(stderr=True)


def open_settings() -> SettingsManager:
    try:
        return SettingsManager(open_store())
    except Exception as e:
        console.print(f"[red]Błąd odczytu konfiguracji:[/red] {e}")
        raise SystemExit(1)


def open_history() -> HistoryManager:
    try:
        return HistoryManager(open_store())
    except Exception as e:
        console.print(f"[red]Błąd odczytu historii:[/red] {e}")
        raise SystemExit(1)
