"""Komenda: vn3sum config — podgląd, import, eksport i reset konfiguracji."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from vn3_model import Configuration, config_errors
from vn3sum._state import open_settings

console = Console()


def run(args: argparse.Namespace) -> None:
    settings = open_settings()

    if args.reset:
        settings.reset()
        console.print("[green]Przywrócono konfigurację domyślną.[/green]")
    elif args.import_file:
        path = Path(args.import_file)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            console.print(f"[red]Nie wczytano {path}:[/red] {e}")
            raise SystemExit(1)
        errors = config_errors(data)
        if errors:
            console.print(f"[red]Niepoprawna konfiguracja w {path}:[/red]")
            for err in errors:
                console.print(f"  {escape(err)}")
            raise SystemExit(1)
        settings.replace(Configuration.from_dict(data))
        console.print(f"[green]Wczytano konfigurację z[/green] {path}")

    data = json.dumps(settings.config.to_dict(), ensure_ascii=False, indent=2)

    if args.export:
        path = Path(args.export)
        path.write_text(data, encoding="utf-8")
        console.print(f"[green]JSON:[/green] {path}")
        return

    if not (args.reset or args.import_file):
        print(data)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "config",
        help="Pokazuje, importuje, eksportuje lub resetuje konfigurację.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Bez opcji wypisuje bieżącą konfigurację (JSON). --reset przywraca reguły,
scalanie grup i etykiety domyślne (bez potwierdzenia). --import zastępuje
konfigurację zawartością pliku (brakujące sekcje = wartości domyślne).

Przykłady:
  vn3sum config
  vn3sum config --export vn3_config.json
  vn3sum config --import vn3_config.json
  vn3sum config --reset
        """,
    )
    group = p.add_mutually_exclusive_group()
    group.add_argument("--reset", action="store_true", help="Przywróć konfigurację domyślną.")
    group.add_argument("--import", dest="import_file", metavar="PLIK", default=None,
                       help="Wczytaj konfigurację z pliku JSON.")
    p.add_argument("--export", metavar="PLIK", default=None, help="Zapisz konfigurację do pliku JSON.")
    p.set_defaults(func=run)
