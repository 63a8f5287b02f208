"""
data_model/serialize.py — Document ↔ słownik gotowy do JSON.

Klucze wyjściowe w camelCase (englishTerm, extractedAt, totalTerms, …).
Pola opcjonalne są pomijane, gdy brak wartości — nigdy null ani [].
"""

from __future__ import annotations

from typing import Any

from .vocabulary import Category, Document, Metadata, Term


def term_to_dict(term: Term) -> dict[str, Any]:
    out: dict[str, Any] = {"id": term.id, "term": term.term}
    if term.english_term:
        out["englishTerm"] = term.english_term
    out["definition"] = term.definition
    if term.notes:
        out["notes"] = list(term.notes)
    if term.examples:
        out["examples"] = list(term.examples)
    if term.remark:
        out["remark"] = term.remark
    return out


def document_to_dict(doc: Document) -> dict[str, Any]:
    meta = doc.metadata
    return {
        "metadata": {
            "title":           meta.title,
            "extractedAt":     meta.extracted_at,
            "totalTerms":      meta.total_terms,
            "totalCategories": meta.total_categories,
        },
        "categories": [
            {
                "id":    c.id,
                "name":  c.name,
                "terms": [term_to_dict(t) for t in c.terms],
            }
            for c in doc.categories
        ],
    }


def document_from_dict(data: dict[str, Any]) -> Document:
    """
    Odtwarza Document z JSON zapisanego przez document_to_dict().

    Metadane są przepisywane bez przeliczania — do weryfikacji spójności
    służy structurer.summary.check_totals().
    """
    meta = data.get("metadata", {})
    categories = [
        Category(
            id=str(c["id"]),
            name=str(c.get("name", "")),
            terms=[_term_from_dict(t) for t in c.get("terms", [])],
        )
        for c in data.get("categories", [])
    ]
    return Document(
        metadata=Metadata(
            title=str(meta.get("title", "")),
            extracted_at=str(meta.get("extractedAt", "")),
            total_terms=int(meta.get("totalTerms", 0)),
            total_categories=int(meta.get("totalCategories", 0)),
        ),
        categories=categories,
    )


def _term_from_dict(d: dict[str, Any]) -> Term:
    return Term(
        id=str(d["id"]),
        term=str(d.get("term", "")),
        definition=str(d.get("definition", "")),
        english_term=d.get("englishTerm"),
        notes=[str(n) for n in d.get("notes", [])],
        examples=[str(e) for e in d.get("examples", [])],
        remark=d.get("remark"),
    )
