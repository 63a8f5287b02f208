"""html_parser — ekstrakcja bloków tekstu z dokumentu znaczników."""

from .parser import ExtractionError, extract_blocks, extract_title, fetch_markup

__all__ = [
    "ExtractionError",
    "extract_blocks",
    "extract_title",
    "fetch_markup",
]
