"""Komenda: vn3sum summarize — PDF licencji VN3 → podsumowanie."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from summary import compose_summary, resolve_all
from vn3_model import (
    ITEMS_BY_KEY,
    ClauseResult,
    HistoryEntry,
    ParsedLicense,
    SelectionState,
    Vn3Error,
)
from vn3sum._state import open_history, open_settings

console = Console()


# ---------------------------------------------------------------------------
# Wybór pozycji
# ---------------------------------------------------------------------------

def _parse_keys(tokens: list[str] | None) -> list[str]:
    """Tokeny "A B", "AB" albo "a,b" → ["A", "B"]."""
    keys: list[str] = []
    for token in tokens or []:
        keys.extend(ch for ch in token.upper() if ch not in ", ")
    unknown = [k for k in keys if k not in ITEMS_BY_KEY]
    if unknown:
        console.print(f"[red]Nieznane pozycje:[/red] {', '.join(unknown)}")
        raise SystemExit(1)
    return keys


def build_selection(args: argparse.Namespace) -> SelectionState:
    only = _parse_keys(args.only)
    selection = SelectionState(only) if only else SelectionState()
    for key in _parse_keys(args.exclude):
        selection.exclude(key)
    return selection


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_table(results: list[ClauseResult], selection: SelectionState) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("POZ",    no_wrap=True, style="bold cyan")
    table.add_column("GRUPA",  no_wrap=True, style="dim")
    table.add_column("NAZWA",  no_wrap=False, max_width=40)
    table.add_column("SKRÓT",  no_wrap=False, max_width=30, style="bold")
    table.add_column("TEKST",  no_wrap=False, max_width=70)

    for r in results:
        item = ITEMS_BY_KEY[r.key]
        key_txt = r.key if selection.is_selected(r.key) else f"[strike]{r.key}[/strike]"
        table.add_row(
            key_txt,
            item.group,
            escape(item.human_label),
            escape(r.short),
            escape(r.raw[:120]) if r.raw else "[dim](brak)[/dim]",
        )

    console.print()
    console.print(table)


def _as_json(parsed: ParsedLicense, results: list[ClauseResult], summary: str) -> str:
    data = {
        "title": parsed.title,
        "rights_holder": parsed.rights_holder,
        "summary": summary,
        "items": {r.key: {"short": r.short, "raw": r.raw} for r in results},
    }
    return json.dumps(data, ensure_ascii=False, indent=2)


# ---------------------------------------------------------------------------
# Wspólna logika (także dla summarize-url)
# ---------------------------------------------------------------------------

def emit_summary(parsed: ParsedLicense, args: argparse.Namespace) -> None:
    settings = open_settings()
    selection = build_selection(args)
    results = resolve_all(parsed.raw_items, settings.config)
    summary = compose_summary(results, selection, settings.config)

    if args.json:
        print(_as_json(parsed, results, summary))
    else:
        console.print(
            f"[bold]{escape(parsed.title)}[/bold]  "
            f"[dim]権利者: {escape(parsed.rights_holder)}[/dim]"
        )
        found = sum(1 for r in results if r.raw)
        console.print(f"[dim]Znaleziono {found}/{len(results)} pozycji.[/dim]\n")
        console.print(summary, markup=False, highlight=False, soft_wrap=True)

    if args.show:
        _show_table(results, selection)

    if args.save:
        open_history().add(HistoryEntry.now(
            summary=summary,
            title=parsed.title,
            rights_holder=parsed.rights_holder,
            raw_items=parsed.raw_items,
        ))
        console.print("[green]Zapisano w historii.[/green]")


def add_output_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--only",
        nargs="+",
        metavar="POZ",
        help="Uwzględnij tylko wskazane pozycje, np. --only A B V lub --only ABV.",
    )
    p.add_argument(
        "--exclude",
        nargs="+",
        metavar="POZ",
        help="Pomiń wskazane pozycje, np. --exclude X.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę wszystkich pozycji (skrót + surowy tekst).",
    )
    p.add_argument(
        "--save",
        action="store_true",
        help="Zapisz podsumowanie w historii.",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Wypisz wynik jako JSON (tytuł, posiadacz praw, pozycje, podsumowanie).",
    )


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    pdf_path = Path(args.pdf_file)
    if not pdf_path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {pdf_path}")
        raise SystemExit(1)
    if pdf_path.suffix.lower() != ".pdf":
        console.print(f"[red]Oczekiwano pliku .pdf, otrzymano:[/red] {pdf_path.suffix}")
        raise SystemExit(1)

    try:
        from pdf.parser import parse_pdf
        parsed = parse_pdf(pdf_path)
    except ImportError as e:
        console.print(f"[red]Błąd importu (brak PyMuPDF?):[/red] {e}")
        raise SystemExit(1)
    except Vn3Error as e:
        console.print(f"[red]Błąd parsowania:[/red] {e}")
        raise SystemExit(1)

    emit_summary(parsed, args)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "summarize",
        help="Parsuje PDF licencji VN3 i wypisuje podsumowanie.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje PDF licencji VN3, dopasowuje pozycje A–X do reguł skrótów
i wypisuje podsumowanie wg bieżącej konfiguracji.

Przykłady:
  vn3sum summarize licencja.pdf
  vn3sum summarize licencja.pdf --show
  vn3sum summarize licencja.pdf --exclude X --save
  vn3sum summarize licencja.pdf --only AB V --json
        """,
    )
    p.add_argument(
        "pdf_file",
        metavar="PLIK.pdf",
        help="Ścieżka do pliku PDF.",
    )
    add_output_arguments(p)
    p.set_defaults(func=run)
