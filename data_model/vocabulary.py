"""
data_model/vocabulary.py — model słownika terminologicznego.

Hierarchia:
  Document → Category ("3.N") → Term ("3.N.M")

Pola opcjonalne (english_term, notes, examples, remark) są pomijane przy
serializacji, gdy są puste — patrz data_model/serialize.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Pojedynczy blok tekstu z ekstraktora (odpowiednik akapitu).
type TextBlock = str

# Bloki w kolejności czytania dokumentu.
type BlockSequence = list[TextBlock]


@dataclass(frozen=True, slots=True)
class CategoryBoundary:
    """Granica kategorii wykryta na pozycji kursora: id "3.N" + tytuł."""
    id: str
    title: str


@dataclass(slots=True)
class Term:
    """
    Pojedyncze hasło słownika.

    - id:           "3.N.M"
    - term:         nazwa w języku podstawowym
    - english_term: odpowiednik angielski (z nawiasu), opcjonalnie
    - definition:   zawsze niepuste (hasła bez definicji są odrzucane)
    - notes:        treści "注記" bez markera
    - examples:     treści "例" bez markera
    - remark:       adnotacja w nawiasach (co najwyżej jedna)
    """
    id: str
    term: str
    definition: str
    english_term: str | None = None
    notes: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)
    remark: str | None = None


@dataclass(slots=True)
class Category:
    id: str     # "3.N"
    name: str   # tytuł kategorii
    terms: list[Term] = field(default_factory=list)


@dataclass(slots=True)
class Metadata:
    title: str
    extracted_at: str       # ISO-8601
    total_terms: int
    total_categories: int


@dataclass(slots=True)
class Document:
    metadata: Metadata
    categories: list[Category] = field(default_factory=list)


def build_document(
    title: str,
    categories: list[Category],
    extracted_at: str,
) -> Document:
    """Składa Document; liczniki w metadanych liczone raz, z gotowej listy."""
    return Document(
        metadata=Metadata(
            title=title,
            extracted_at=extracted_at,
            total_terms=sum(len(c.terms) for c in categories),
            total_categories=len(categories),
        ),
        categories=categories,
    )
