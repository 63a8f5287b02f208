"""
structurer/summary.py — podsumowanie wyekstrahowanego słownika.

summarize()    — zagregowane liczniki do wyświetlenia
check_totals() — porównanie metadanych z rzeczywistą zawartością
"""

from __future__ import annotations

from dataclasses import dataclass, field

from data_model.vocabulary import Document


@dataclass(slots=True)
class CategorySummary:
    id: str
    name: str
    terms: int


@dataclass(slots=True)
class VocabularySummary:
    categories: int = 0
    terms: int = 0
    with_english: int = 0
    notes: int = 0
    examples: int = 0
    remarks: int = 0
    per_category: list[CategorySummary] = field(default_factory=list)


def summarize(doc: Document) -> VocabularySummary:
    summary = VocabularySummary(categories=len(doc.categories))
    for category in doc.categories:
        summary.per_category.append(
            CategorySummary(id=category.id, name=category.name, terms=len(category.terms))
        )
        for term in category.terms:
            summary.terms += 1
            summary.with_english += 1 if term.english_term else 0
            summary.notes += len(term.notes)
            summary.examples += len(term.examples)
            summary.remarks += 1 if term.remark else 0
    return summary


def check_totals(doc: Document) -> list[str]:
    """Zwraca listę rozbieżności między metadanymi a przeliczeniem (pusta = OK)."""
    problems: list[str] = []
    terms = sum(len(c.terms) for c in doc.categories)
    if doc.metadata.total_terms != terms:
        problems.append(f"totalTerms={doc.metadata.total_terms}, przeliczone={terms}")
    if doc.metadata.total_categories != len(doc.categories):
        problems.append(
            f"totalCategories={doc.metadata.total_categories}, "
            f"przeliczone={len(doc.categories)}"
        )
    return problems
