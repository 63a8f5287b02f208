"""Komenda: jv show — wyświetla zawartość pliku JSON ze słownikiem."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box

from data_model.serialize import document_from_dict
from jv.commands.extract import show_summary
from structurer import check_totals

console = Console(width=180)


def run(args: argparse.Namespace) -> None:
    path = Path(args.json_file)
    if not path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)

    try:
        doc = document_from_dict(json.loads(path.read_text(encoding="utf-8")))
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        console.print(f"[red]Nieprawidłowy plik JSON:[/red] {e}")
        raise SystemExit(1)

    meta = doc.metadata
    console.print(f"[bold]{meta.title}[/bold]  [dim]{meta.extracted_at}[/dim]")

    for problem in check_totals(doc):
        console.print(f"[yellow]Niespójne metadane:[/yellow] {problem}")

    show_summary(doc, console)

    if not args.terms:
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("ID",        no_wrap=True, style="bold cyan")
    table.add_column("HASŁO",     no_wrap=True)
    table.add_column("EN",        no_wrap=True, style="green")
    table.add_column("DEFINICJA", no_wrap=False, max_width=80)
    table.add_column("注記/例",    justify="right", no_wrap=True, style="dim")

    for category in doc.categories:
        if args.category and category.id != args.category:
            continue
        for t in category.terms:
            table.add_row(
                t.id,
                t.term,
                t.english_term or "-",
                t.definition,
                f"{len(t.notes)}/{len(t.examples)}",
            )

    console.print(table)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "show",
        help="Wyświetla podsumowanie (i opcjonalnie hasła) z pliku JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje JSON zapisany przez jv extract, sprawdza spójność metadanych
i wyświetla tabelę kategorii.

Przykłady:
  jv show output/jisq9000.terms.json
  jv show output/jisq9000.terms.json --terms --category 3.1
        """,
    )
    p.add_argument(
        "json_file",
        metavar="PLIK.json",
        help="Ścieżka do pliku JSON.",
    )
    p.add_argument(
        "--terms",
        action="store_true",
        help="Wyświetl tabelę haseł.",
    )
    p.add_argument(
        "--category",
        metavar="ID",
        default=None,
        help="Ogranicz tabelę haseł do jednej kategorii (np. 3.1).",
    )
    p.set_defaults(func=run)
