"""
structurer/ordering.py — opcjonalne sortowanie po numerach identyfikatorów.

Strukturyzacja zachowuje kolejność dokumentu; sort_by_id() to osobny krok
końcowy, który porządkuje kategorie i hasła numerycznie, komponent po
komponencie ("3.10" po "3.9", nie po "3.1").
"""

from __future__ import annotations

from data_model.vocabulary import Category, Document, build_document


def id_sort_key(item_id: str) -> tuple[tuple[int, int | str], ...]:
    """"3.1.10" → ((0, 3), (0, 1), (0, 10)); komponenty nienumeryczne na końcu."""
    key: list[tuple[int, int | str]] = []
    for part in item_id.strip().split("."):
        key.append((0, int(part)) if part.isdigit() else (1, part))
    return tuple(key)


def sort_by_id(doc: Document) -> Document:
    """Zwraca nowy Document z posortowanymi kategoriami i hasłami."""
    categories = [
        Category(
            id=c.id,
            name=c.name,
            terms=sorted(c.terms, key=lambda t: id_sort_key(t.id)),
        )
        for c in sorted(doc.categories, key=lambda c: id_sort_key(c.id))
    ]
    return build_document(doc.metadata.title, categories, doc.metadata.extracted_at)
