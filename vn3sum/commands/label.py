"""Komenda: vn3sum label — własne etykiety linii pozycji."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape

from vn3_model import ITEM_KEYS, ITEMS_BY_KEY
from vn3sum._state import open_settings

console = Console()


def run(args: argparse.Namespace) -> None:
    settings = open_settings()
    key = args.key.upper()
    if key not in ITEMS_BY_KEY:
        console.print(f"[red]Nieznana pozycja:[/red] {escape(args.key)}")
        raise SystemExit(1)

    if args.clear:
        settings.clear_label(key)
        console.print(f"[green]Etykieta {key} przywrócona do domyślnej.[/green]")
        return

    if args.label is None:
        current = settings.config.labels.get(key)
        default = ITEMS_BY_KEY[key].default_output_label
        console.print(
            f"{key}: [bold]{escape(current or default)}[/bold]"
            + ("" if current else " [dim](domyślna)[/dim]")
        )
        return

    settings.set_label(key, args.label)
    console.print(f"[green]Etykieta {key}:[/green] {escape(args.label)}")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "label",
        help="Ustawia / usuwa własną etykietę pozycji.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Etykieta zastępuje literę pozycji w linii "<etykieta>：<skrót>" (tylko dla
pozycji wypisywanych osobno, nie w scalonych grupach).

Przykłady:
  vn3sum label V
  vn3sum label V クレジット
  vn3sum label V --clear
        """,
    )
    p.add_argument("key", metavar="POZ", help=f"Pozycja ({ITEM_KEYS[0]}–{ITEM_KEYS[-1]}).")
    p.add_argument("label", metavar="ETYKIETA", nargs="?", default=None, help="Nowa etykieta.")
    p.add_argument("--clear", action="store_true", help="Usuń własną etykietę.")
    p.set_defaults(func=run)
