"""
structurer — odbudowa hierarchii kategorii i haseł słownika z bloków tekstu.

Interfejs publiczny:
    structure        — bloki → Document
    iter_categories  — leniwie: (CategoryBoundary, [Term])
    sort_by_id       — opcjonalne sortowanie numeryczne
    summarize        — liczniki do raportu

Typowe użycie:
    from html_parser import extract_blocks
    from structurer import structure

    blocks = extract_blocks(Path("jisq9000.html").read_text(encoding="utf-8"))
    doc    = structure(blocks, "JIS Q 9000")
"""

from .ordering import sort_by_id
from .structurer import iter_categories, structure
from .summary import VocabularySummary, check_totals, summarize
from .types import CursorError, Diagnostic, DiagnosticCode

__all__ = [
    "structure",
    "iter_categories",
    "sort_by_id",
    "summarize",
    "check_totals",
    "VocabularySummary",
    "CursorError",
    "Diagnostic",
    "DiagnosticCode",
]
