"""
data_model — struktury danych słownika terminologicznego.

Użycie:
  from data_model import Document, Category, Term, document_to_dict

Moduły:
  vocabulary — TextBlock, CategoryBoundary, Term, Category, Metadata, Document
  serialize  — Document ↔ słownik JSON (camelCase, pola opcjonalne pomijane)

Mapowanie na JSON wyjściowy:
  metadata.extractedAt     → Metadata.extracted_at
  metadata.totalTerms      → Metadata.total_terms
  metadata.totalCategories → Metadata.total_categories
  terms[].englishTerm      → Term.english_term
"""

from .vocabulary import (
    TextBlock,
    BlockSequence,
    CategoryBoundary,
    Term,
    Category,
    Metadata,
    Document,
    build_document,
)
from .serialize import (
    document_to_dict,
    document_from_dict,
    term_to_dict,
)

__all__ = [
    # vocabulary
    "TextBlock",
    "BlockSequence",
    "CategoryBoundary",
    "Term",
    "Category",
    "Metadata",
    "Document",
    "build_document",
    # serialize
    "document_to_dict",
    "document_from_dict",
    "term_to_dict",
]
