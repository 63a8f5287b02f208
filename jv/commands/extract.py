"""Komenda: jv extract — ekstrakcja słownika z pliku HTML/XML do JSON."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box

from data_model.serialize import document_to_dict
from data_model.vocabulary import Document
from html_parser import ExtractionError, extract_blocks, extract_title
from jv._config import Settings, load_settings
from structurer import Diagnostic, sort_by_id, structure, summarize

console = Console()


# ---------------------------------------------------------------------------
# Zapis do JSON
# ---------------------------------------------------------------------------

def _write_json(doc: Document, json_path: Path) -> None:
    json_path.parent.mkdir(parents=True, exist_ok=True)
    data = document_to_dict(doc)
    json_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    console.print(
        f"[green]JSON:[/green] {json_path}  "
        f"({doc.metadata.total_categories} kategorii, {doc.metadata.total_terms} haseł)"
    )


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def show_summary(doc: Document, out: Console = console) -> None:
    """Tabela kategorii z liczbą haseł i podsumowaniem treści."""
    s = summarize(doc)
    if not s.categories:
        out.print("[yellow]Nie rozpoznano żadnej kategorii.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("ID",     no_wrap=True, style="bold cyan")
    table.add_column("NAZWA",  no_wrap=False, max_width=50)
    table.add_column("HASŁA",  justify="right", no_wrap=True)

    for c in s.per_category:
        table.add_row(c.id, c.name, str(c.terms))

    out.print()
    out.print(table)
    out.print(
        f"  [dim]{s.categories} kategorii, {s.terms} haseł "
        f"(EN: {s.with_english}, uwagi 注記: {s.notes}, przykłady 例: {s.examples}, "
        f"adnotacje: {s.remarks})[/dim]\n"
    )


def _show_diagnostics(diagnostics: list[Diagnostic]) -> None:
    if not diagnostics:
        console.print("[dim]Brak pominiętych bloków.[/dim]")
        return
    for d in diagnostics:
        console.print(f"  [yellow]{d.code}[/yellow] [dim]@{d.position}[/dim] {d.message}")


# ---------------------------------------------------------------------------
# Wspólny przebieg: znaczniki → Document → JSON
# ---------------------------------------------------------------------------

def default_output_path(args: argparse.Namespace, settings: Settings, stem: str) -> Path:
    if args.output:
        return Path(args.output)
    out_dir = Path(args.out_dir) if args.out_dir else settings.output_dir
    return out_dir / f"{stem}.terms.json"


def process_markup(
    raw: str | bytes,
    stem: str,
    args: argparse.Namespace,
    settings: Settings,
) -> Document:
    """Ekstrakcja bloków, strukturyzacja, opcjonalne sortowanie i zapis."""
    try:
        blocks = extract_blocks(raw)
        title = args.title or extract_title(raw) or settings.default_title
    except ExtractionError as e:
        console.print(f"[red]Błąd ekstrakcji:[/red] {e}")
        raise SystemExit(1)

    console.print(f"Bloków tekstu: [bold]{len(blocks)}[/bold]")

    diagnostics: list[Diagnostic] = []
    chapter = args.chapter or settings.chapter
    try:
        doc = structure(blocks, title, chapter=chapter, diagnostics=diagnostics)
    except ValueError as e:
        console.print(f"[red]Błędna konfiguracja:[/red] {e}")
        raise SystemExit(1)

    sort = settings.sort if args.sort is None else args.sort
    if sort:
        doc = sort_by_id(doc)

    _write_json(doc, default_output_path(args, settings, stem))

    if args.verbose:
        _show_diagnostics(diagnostics)
    if args.show:
        show_summary(doc)
    return doc


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def settings_or_exit() -> Settings:
    try:
        return load_settings()
    except ValueError as e:
        console.print(f"[red]Błędna konfiguracja:[/red] {e}")
        raise SystemExit(1)


def run(args: argparse.Namespace) -> None:
    settings = settings_or_exit()
    src = Path(args.markup_file)
    if not src.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {src}")
        raise SystemExit(1)

    console.print(f"Parsowanie [bold]{src}[/bold] …")
    process_markup(src.read_bytes(), src.stem, args, settings)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_common_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--title",
        metavar="TYTUŁ",
        default=None,
        help="Tytuł do metadanych (domyślnie: <title> / <h1> / JV_DEFAULT_TITLE).",
    )
    target = p.add_mutually_exclusive_group()
    target.add_argument(
        "--output", "-o",
        metavar="PLIK.json",
        default=None,
        help="Ścieżka pliku wyjściowego.",
    )
    target.add_argument(
        "--out-dir",
        metavar="KATALOG",
        default=None,
        help="Katalog wyjściowy (domyślnie: JV_OUTPUT_DIR lub ./output).",
    )
    p.add_argument(
        "--chapter",
        metavar="N",
        default=None,
        help="Numer rozdziału z hasłami (domyślnie: JV_CHAPTER lub 3).",
    )
    p.add_argument(
        "--sort",
        action="store_true",
        default=None,
        help="Sortuj kategorie i hasła numerycznie po id (domyślnie: kolejność dokumentu).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę kategorii po zapisie.",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Wypisz pominięte bloki, kategorie i hasła.",
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "extract",
        help="Ekstrakcja słownika z pliku HTML/XML do JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Czyta dokument znaczników, dzieli go na bloki tekstu i odbudowuje
hierarchię: kategorie "3.N" → hasła "3.N.M" (nazwa, odpowiednik
angielski, definicja, 注記, 例, adnotacja).

Przykłady:
  jv extract jisq9000.html --show
  jv extract jisq9000.html -o public/terms.json --sort
  jv extract document.xml --title "JIS Q 9000:2015" --verbose
        """,
    )
    p.add_argument(
        "markup_file",
        metavar="PLIK",
        help="Ścieżka do pliku HTML/XML.",
    )
    add_common_arguments(p)
    p.set_defaults(func=run)
