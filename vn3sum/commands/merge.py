"""Komenda: vn3sum merge — scalanie pozycji grupy w jedną linię."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.table import Table

from vn3_model import GROUPS, group_keys, group_label
from vn3sum._state import open_settings

console = Console()


def _show(settings) -> None:
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", expand=False)
    table.add_column("GRUPA", no_wrap=True, style="bold cyan")
    table.add_column("POZYCJE", no_wrap=True)
    table.add_column("ETYKIETA", no_wrap=True)
    table.add_column("SCALANIE", justify="center", no_wrap=True)
    for group in GROUPS:
        members = group_keys(group)
        merge = settings.config.should_merge(group)
        if len(members) < 2:
            state = "[dim]-[/dim]"
        else:
            state = "[green]tak[/green]" if merge else "[yellow]nie[/yellow]"
        table.add_row(group, " ".join(members), group_label(group), state)
    console.print()
    console.print(table)


def run(args: argparse.Namespace) -> None:
    settings = open_settings()

    if args.group is None:
        _show(settings)
        return

    if args.state is None:
        console.print("[red]Podaj stan:[/red] on | off")
        raise SystemExit(1)

    settings.set_merge(args.group, args.state == "on")
    if len(group_keys(args.group)) < 2:
        console.print(
            f"[yellow]Grupa [bold]{args.group}[/bold] ma jedną pozycję — "
            f"ustawienie nie zmienia podsumowania.[/yellow]"
        )
    console.print(f"[green]Scalanie {args.group}: {args.state}[/green]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "merge",
        help="Włącza / wyłącza scalanie pozycji grupy w jedną linię.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Scalona grupa daje jedną linię "<etykieta grupy>：<skrót>", gdy wszystkie
wybrane pozycje mają ten sam skrót, albo "<etykieta>：A:x B:y" gdy się różnią.
Bez argumentów wypisuje bieżące ustawienia.

Przykłady:
  vn3sum merge
  vn3sum merge AB off
  vn3sum merge SU on
        """,
    )
    p.add_argument("group", metavar="GRUPA", nargs="?", choices=list(GROUPS), help="Grupa pozycji.")
    p.add_argument("state", metavar="STAN", nargs="?", choices=["on", "off"], help="on | off")
    p.set_defaults(func=run)
