"""Komenda: jv extract-url — pobiera stronę HTML i ekstrahuje słownik do JSON."""

from __future__ import annotations

import argparse
import re
import unicodedata
from urllib.parse import urlparse

from rich.console import Console

from html_parser import ExtractionError, fetch_markup
from jv.commands.extract import add_common_arguments, process_markup, settings_or_exit

console = Console()


def _stem_from_url(url: str) -> str:
    """Generuje nazwę pliku wyjściowego z URL (host + path jako slug ASCII)."""
    parsed = urlparse(url)
    host = parsed.netloc.replace(".", "-").replace(":", "-")
    path = parsed.path.strip("/").replace("/", "-")
    raw = f"{host}-{path}" if path else host
    raw = unicodedata.normalize("NFKD", raw).encode("ascii", "ignore").decode("ascii")
    raw = re.sub(r"[^\w-]", "-", raw).strip("-")
    raw = re.sub(r"-{2,}", "-", raw)
    return raw[:80] or "url-doc"


def run(args: argparse.Namespace) -> None:
    settings = settings_or_exit()
    url: str = args.url

    console.print(f"Pobieranie [bold]{url}[/bold] …")

    try:
        raw = fetch_markup(url, timeout=settings.http_timeout)
    except ExtractionError as e:
        console.print(f"[red]Błąd pobierania:[/red] {e}")
        raise SystemExit(1)

    process_markup(raw, _stem_from_url(url), args, settings)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "extract-url",
        help="Pobiera stronę HTML i ekstrahuje z niej słownik do JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pobiera dokument HTML spod podanego URL i przetwarza go jak jv extract.

Przykłady:
  jv extract-url https://example.com/jisq9000.html --show
  jv extract-url https://example.com/vocab --out-dir public --sort
        """,
    )
    p.add_argument(
        "url",
        metavar="URL",
        help="Adres URL dokumentu HTML.",
    )
    add_common_arguments(p)
    p.set_defaults(func=run)
