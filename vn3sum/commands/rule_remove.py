"""Komenda: vn3sum rule-remove — usuwanie reguły skrótu."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape

from storage import RULE_GROUPS
from vn3sum._state import open_settings

console = Console()


def run(args: argparse.Namespace) -> None:
    settings = open_settings()
    try:
        rule = settings.remove_rule(args.group, args.index)
    except ValueError as e:
        console.print(f"[red]Nie usunięto reguły:[/red] {e}")
        raise SystemExit(1)

    console.print(
        f"[green]Usunięto z [bold]{args.group}[/bold]:[/green] "
        f"{escape(rule.pattern)} → {escape(rule.short)}"
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "rule-remove",
        help="Usuwa regułę skrótu z grupy.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Usuwa regułę o podanym indeksie (kolumna # w vn3sum rules).

Przykłady:
  vn3sum rule-remove MN 2
        """,
    )
    p.add_argument("group", metavar="GRUPA", choices=list(RULE_GROUPS), help="Grupa reguł.")
    p.add_argument("index", metavar="INDEKS", type=int, help="Indeks reguły (0-based).")
    p.set_defaults(func=run)
