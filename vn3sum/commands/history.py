"""Komenda: vn3sum history — historia zapisanych podsumowań."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from summary import rederive
from vn3sum._state import open_history, open_settings

console = Console()


def _show_list(entries) -> None:
    if not entries:
        console.print("[yellow]Historia jest pusta.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",        justify="right", no_wrap=True, style="dim")
    table.add_column("DATA",     no_wrap=True)
    table.add_column("TYTUŁ",    no_wrap=False, max_width=40, style="bold")
    table.add_column("権利者",    no_wrap=False, max_width=30)
    table.add_column("PODSUMOWANIE", no_wrap=True, max_width=60)

    for i, entry in enumerate(entries):
        first_line = entry.summary.splitlines()[0] if entry.summary else ""
        table.add_row(
            str(i),
            entry.timestamp,
            escape(entry.title),
            escape(entry.rights_holder),
            escape(first_line),
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(entries)} wpisów[/dim]\n")


def run(args: argparse.Namespace) -> None:
    history = open_history()

    if args.clear:
        history.clear()
        console.print("[green]Historia wyczyszczona.[/green]")
        return

    if args.show is not None:
        try:
            entry = history.get(args.show)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise SystemExit(1)
        console.print(
            f"[bold]{escape(entry.title)}[/bold]  "
            f"[dim]権利者: {escape(entry.rights_holder)} ({entry.timestamp})[/dim]\n"
        )
        text = entry.summary if args.stored else rederive(entry, open_settings().config)
        console.print(text, markup=False, highlight=False, soft_wrap=True)
        return

    _show_list(history.entries)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "history",
        help="Listuje / odtwarza / czyści historię podsumowań.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Historia przechowuje do 50 ostatnich podsumowań (najnowsze pierwsze).
--show N odtwarza wpis wg BIEŻĄCEJ konfiguracji (jeśli zapisano surowe
pozycje); --stored wypisuje tekst zapisany w chwili dodania.

Przykłady:
  vn3sum history
  vn3sum history --show 0
  vn3sum history --show 3 --stored
  vn3sum history --clear
        """,
    )
    p.add_argument("--show", type=int, metavar="N", default=None, help="Wypisz wpis o indeksie N.")
    p.add_argument("--stored", action="store_true", help="(z --show) tekst zapisany, bez odtwarzania.")
    p.add_argument("--clear", action="store_true", help="Usuń całą historię (bez potwierdzenia).")
    p.set_defaults(func=run)
