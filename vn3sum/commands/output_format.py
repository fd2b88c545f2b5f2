"""Komenda: vn3sum format — prefix i separator linii podsumowania."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape

from vn3sum._state import open_settings

console = Console()


def _decode_escapes(text: str) -> str:
    # "\n" i "\t" z linii poleceń jako prawdziwe znaki
    return text.replace("\\n", "\n").replace("\\t", "\t")


def run(args: argparse.Namespace) -> None:
    settings = open_settings()

    if args.prefix is not None:
        settings.set_prefix(args.prefix)
    if args.separator is not None:
        try:
            settings.set_separator(_decode_escapes(args.separator))
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise SystemExit(1)

    config = settings.config
    console.print(f"prefix:    [bold]{escape(repr(config.prefix))}[/bold]")
    console.print(f"separator: [bold]{escape(repr(config.separator))}[/bold]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "format",
        help="Ustawia prefix i separator linii podsumowania.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Prefix (jeśli niepusty) jest osobną pierwszą linią podsumowania i jest
łączony z resztą tym samym separatorem co pozostałe linie, a nie spacją:
prefix "ライセンス-個人利用：" z separatorem " / " daje
"ライセンス-個人利用： / 利用主体：… / V：…". Separator łączy linie
(domyślnie znak nowej linii; "\\n" i "\\t" są rozwijane).
Bez opcji wypisuje bieżące ustawienia.

Przykłady:
  vn3sum format
  vn3sum format --prefix "ライセンス-個人利用："
  vn3sum format --separator " / "
  vn3sum format --prefix "" --separator "\\n"
        """,
    )
    p.add_argument("--prefix", metavar="TEKST", default=None, help="Pierwsza linia podsumowania.")
    p.add_argument("--separator", metavar="TEKST", default=None, help="Łącznik linii.")
    p.set_defaults(func=run)
