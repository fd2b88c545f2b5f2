"""Komenda: vn3sum rule-add — dodawanie reguły skrótu."""

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
        rule = settings.add_rule(args.group, args.pattern, args.short, position=args.position)
    except ValueError as e:
        console.print(f"[red]Nie dodano reguły:[/red] {e}")
        raise SystemExit(1)

    console.print(
        f"[green]Dodano do [bold]{args.group}[/bold]:[/green] "
        f"{escape(rule.pattern)} → [bold]{escape(rule.short)}[/bold]"
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "rule-add",
        help="Dodaje regułę skrótu do grupy.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dodaje regułę (wzorzec → skrót) do grupy. Domyślnie na koniec listy;
--position wstawia regułę wyżej (0 = sprawdzana jako pierwsza).

Przykłady:
  vn3sum rule-add V "表記してください" 必要
  vn3sum rule-add common "許可します" OK --position 0
        """,
    )
    p.add_argument("group", metavar="GRUPA", choices=list(RULE_GROUPS), help="Grupa reguł.")
    p.add_argument("pattern", metavar="WZORZEC", help="Fragment tekstu pozycji.")
    p.add_argument("short", metavar="SKRÓT", help="Tekst wstawiany do podsumowania.")
    p.add_argument(
        "--position",
        type=int,
        metavar="N",
        default=None,
        help="Indeks (0-based), na który wstawić regułę.",
    )
    p.set_defaults(func=run)
