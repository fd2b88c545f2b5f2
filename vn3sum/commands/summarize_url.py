"""Komenda: vn3sum summarize-url — pobiera PDF licencji z URL i wypisuje podsumowanie."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape

from pdf.parser import parse_pdf_bytes
from remote import fetch_document
from storage import _env
from vn3_model import AccessDenied, NetworkFailure, Vn3Error
from vn3sum.commands.summarize import add_output_arguments, emit_summary

console = Console()


def run(args: argparse.Namespace) -> None:
    url: str = args.url
    relay: str | None = args.relay or _env.relay_template()

    console.print(f"Pobieranie [bold]{escape(url)}[/bold] …")

    try:
        data = fetch_document(url, relay=relay, timeout=_env.fetch_timeout())
    except AccessDenied as e:
        console.print(f"[red]Błąd pobierania z URL:[/red] {e}")
        if e.page_title:
            console.print(f"[dim]Strona HTML: {escape(e.page_title)}[/dim]")
        raise SystemExit(1)
    except NetworkFailure as e:
        console.print(f"[red]Błąd pobierania z URL:[/red] {e}")
        raise SystemExit(1)

    try:
        parsed = parse_pdf_bytes(data)
    except Vn3Error as e:
        console.print(f"[red]Błąd parsowania:[/red] {e}")
        raise SystemExit(1)

    emit_summary(parsed, args)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "summarize-url",
        help="Pobiera PDF licencji z URL (także link Google Drive) i wypisuje podsumowanie.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pobiera PDF licencji VN3 spod podanego URL i wypisuje podsumowanie.

Link udostępniania Google Drive (.../file/d/<id>/view) zamieniany jest na
link bezpośredniego pobrania. Jeśli zamiast PDF przyjdzie strona HTML,
plik najpewniej nie jest udostępniony "każdemu, kto ma link".

Relay (np. proxy CORS) można podać opcją --relay lub zmienną
VN3SUM_RELAY_URL; "{url}" w szablonie zastępowane jest zakodowanym adresem.

Przykłady:
  vn3sum summarize-url https://example.com/licencja.pdf
  vn3sum summarize-url https://drive.google.com/file/d/1AbC.../view --show
  vn3sum summarize-url URL --relay "https://api.allorigins.win/raw?url={url}"
        """,
    )
    p.add_argument(
        "url",
        metavar="URL",
        help="Adres URL dokumentu PDF.",
    )
    p.add_argument(
        "--relay",
        metavar="SZABLON",
        default=None,
        help="Szablon relay z {url} (domyślnie: VN3SUM_RELAY_URL lub bez relay).",
    )
    add_output_arguments(p)
    p.set_defaults(func=run)
