"""
vn3sum — narzędzie CLI do skracania licencji VN3.

Użycie:
  vn3sum <komenda> [opcje]

Komendy:
  summarize      Parsuje PDF licencji i wypisuje podsumowanie.
  summarize-url  Pobiera PDF z URL (także link Google Drive) i wypisuje podsumowanie.
  rules          Listuje reguły skrótów (per grupa).
  rule-add       Dodaje regułę skrótu do grupy.
  rule-remove    Usuwa regułę skrótu z grupy.
  merge          Włącza / wyłącza scalanie pozycji grupy w jedną linię.
  label          Ustawia / usuwa własną etykietę pozycji.
  format         Ustawia prefix i separator linii podsumowania.
  history        Listuje / odtwarza / czyści historię podsumowań.
  config         Pokazuje, eksportuje lub resetuje konfigurację.
"""

from __future__ import annotations

import argparse
import logging
import sys

# Windows: terminal może używać cp1252, więc wymuszamy UTF-8, żeby japońskie
# etykiety i polskie teksty pomocy były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from vn3sum.commands import summarize as cmd_summarize
from vn3sum.commands import summarize_url as cmd_summarize_url
from vn3sum.commands import rules as cmd_rules
from vn3sum.commands import rule_add as cmd_rule_add
from vn3sum.commands import rule_remove as cmd_rule_remove
from vn3sum.commands import merge as cmd_merge
from vn3sum.commands import label as cmd_label
from vn3sum.commands import output_format as cmd_format
from vn3sum.commands import history as cmd_history
from vn3sum.commands import config as cmd_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vn3sum",
        description="vn3sum — skróty licencji VN3 (A–X) z dokumentów PDF.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="vn3sum 0.1.0"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Wypisuj komunikaty diagnostyczne (logging DEBUG).",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_summarize.add_parser(subparsers)
    cmd_summarize_url.add_parser(subparsers)
    cmd_rules.add_parser(subparsers)
    cmd_rule_add.add_parser(subparsers)
    cmd_rule_remove.add_parser(subparsers)
    cmd_merge.add_parser(subparsers)
    cmd_label.add_parser(subparsers)
    cmd_format.add_parser(subparsers)
    cmd_history.add_parser(subparsers)
    cmd_config.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
