"""
jv — narzędzie CLI do ekstrakcji słownika terminologicznego.

Użycie:
  jv <komenda> [opcje]

Komendy:
  extract      Ekstrakcja słownika z pliku HTML/XML do JSON.
  extract-url  Pobiera stronę HTML i ekstrahuje z niej słownik do JSON.
  show         Wyświetla podsumowanie pliku JSON ze słownikiem.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby znaki
# japońskie i polskie w wyjściu były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from jv.commands import extract as cmd_extract
from jv.commands import extract_url as cmd_extract_url
from jv.commands import show as cmd_show


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jv",
        description="jisvocab — ekstrakcja słownika terminologicznego.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="jv 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_extract.add_parser(subparsers)
    cmd_extract_url.add_parser(subparsers)
    cmd_show.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
