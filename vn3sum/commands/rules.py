"""Komenda: vn3sum rules — listowanie reguł skrótów."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from storage import RULE_GROUPS
from vn3_model import GROUP_TITLES
from vn3sum._state import open_settings

console = Console(width=220)


def run(args: argparse.Namespace) -> None:
    config = open_settings().config
    groups = args.group or list(RULE_GROUPS)

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("GRUPA",  no_wrap=True, style="bold cyan")
    table.add_column("#",      justify="right", no_wrap=True, style="dim")
    table.add_column("WZORZEC", no_wrap=False, max_width=90)
    table.add_column("SKRÓT",  no_wrap=False, max_width=40, style="bold")

    total = 0
    for group in groups:
        rules = config.rules_for(group)
        title = GROUP_TITLES.get(group, group)
        if not rules:
            table.add_row(escape(title), "-", "[dim](brak reguł)[/dim]", "")
            continue
        for i, rule in enumerate(rules):
            table.add_row(
                escape(title) if i == 0 else "",
                str(i),
                escape(rule.pattern),
                escape(rule.short),
            )
            total += 1

    console.print()
    console.print(table)
    _pl = "reguła" if total == 1 else ("reguły" if 2 <= total % 10 <= 4 and total % 100 not in range(11, 15) else "reguł")
    console.print(f"  [dim]{total} {_pl}[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "rules",
        help="Listuje reguły skrótów (per grupa).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Listuje reguły skrótów z bieżącej konfiguracji. W obrębie grupy reguły są
sprawdzane w kolejności (#); wygrywa pierwsza, której wzorzec występuje
w tekście pozycji. Reguły grupy mają pierwszeństwo przed "common".

Przykłady:
  vn3sum rules
  vn3sum rules --group AB common
        """,
    )
    p.add_argument(
        "--group", "-g",
        nargs="+",
        metavar="GRUPA",
        choices=list(RULE_GROUPS),
        help="Pokaż tylko wskazane grupy (można podać kilka).",
    )
    p.set_defaults(func=run)
