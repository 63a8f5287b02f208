"""
structurer/structurer.py — odbudowa hierarchii słownika z płaskich bloków.

Architektura:
  bloki → _find_category()   → CategoryBoundary ("3.N" + tytuł)
        → _parse_term() × N  → Term ("3.N.M"), do następnej kategorii
        → iter_categories()  → (CategoryBoundary, [Term]) dla niepustych kategorii
        → structure()        → Document

Kursor to zwykły int: każda funkcja skanująca dostaje pozycję startową
i zwraca pozycję za ostatnim zużytym blokiem. Kursor nigdy się nie cofa.

Kluczowe funkcje publiczne:
  structure(blocks, document_title) -> Document
  iter_categories(blocks)           -> Iterator[(CategoryBoundary, list[Term])]
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from datetime import datetime, timezone

from data_model.vocabulary import (
    Category,
    CategoryBoundary,
    Document,
    Term,
    TextBlock,
    build_document,
)

from .content import ContentClassifier
from .patterns import (
    DEFAULT_CHAPTER,
    BlockKind,
    classify_block,
    is_boundary,
    is_category_id,
    is_latin_gloss,
    is_term_id,
)
from .term_name import join_name, split_bilingual
from .types import CursorError, Diagnostic, DiagnosticCode

type Diagnostics = list[Diagnostic] | None


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def structure(
    blocks: Sequence[TextBlock],
    document_title: str,
    *,
    chapter: str = DEFAULT_CHAPTER,
    extracted_at: datetime | None = None,
    diagnostics: Diagnostics = None,
) -> Document:
    """
    Buduje Document z sekwencji bloków.

    Args:
        blocks:         bloki tekstu w kolejności dokumentu.
        document_title: tytuł do metadanych.
        chapter:        numer rozdziału słownika (domyślnie "3").
        extracted_at:   znacznik czasu (domyślnie: teraz, UTC).
        diagnostics:    opcjonalna lista, do której trafiają pominięte anomalie.

    Nigdy nie rzuca dla nieoczekiwanej zawartości bloków — anomalie są
    pomijane. Kategorie i hasła w kolejności dokumentu.
    """
    categories = [
        Category(id=boundary.id, name=boundary.title, terms=terms)
        for boundary, terms in iter_categories(
            blocks, chapter=chapter, diagnostics=diagnostics,
        )
    ]
    stamp = (extracted_at or datetime.now(timezone.utc)).isoformat()
    return build_document(document_title, categories, stamp)


def iter_categories(
    blocks: Sequence[TextBlock],
    *,
    chapter: str = DEFAULT_CHAPTER,
    diagnostics: Diagnostics = None,
) -> Iterator[tuple[CategoryBoundary, list[Term]]]:
    """Leniwie zwraca pary (granica kategorii, hasła) — tylko niepuste kategorie."""
    n = len(blocks)
    pos = 0
    while pos < n:
        start = pos
        boundary, pos = _find_category(blocks, pos, chapter, diagnostics)
        _check_cursor(start, pos, n)
        if boundary is None:
            return

        terms: list[Term] = []
        while True:
            start = pos
            pos = _skip_blank(blocks, pos)
            if pos >= n or is_category_id(blocks[pos], chapter):
                break
            if is_term_id(blocks[pos], chapter):
                term, pos = _parse_term(blocks, pos, chapter, diagnostics)
                if term is not None:
                    terms.append(term)
            else:
                _note(diagnostics, DiagnosticCode.STRAY_BLOCK, pos,
                      f"Pominięto blok poza hasłem: '{blocks[pos][:40]}'")
                pos += 1
            _check_cursor(start, pos, n)
            if pos == start:
                raise CursorError(f"Kursor nie przesunął się na pozycji {pos}")

        if terms:
            yield boundary, terms
        else:
            _note(diagnostics, DiagnosticCode.CATEGORY_EMPTY, pos,
                  f"Kategoria {boundary.id} bez haseł — pominięta")


# ---------------------------------------------------------------------------
# Skanowanie
# ---------------------------------------------------------------------------

def _is_blank(block: TextBlock) -> bool:
    return not block.strip()


def _skip_blank(blocks: Sequence[TextBlock], pos: int) -> int:
    while pos < len(blocks) and _is_blank(blocks[pos]):
        pos += 1
    return pos


def _find_category(
    blocks: Sequence[TextBlock],
    pos: int,
    chapter: str,
    diagnostics: Diagnostics,
) -> tuple[CategoryBoundary | None, int]:
    """
    Szuka następnego identyfikatora "3.N" i bloku tytułu za nim.

    Identyfikator, za którym od razu stoi kolejna granica, nie ma tytułu;
    skan wznawia się od tej granicy.

    Zwraca (None, len(blocks)) gdy nie ma już kategorii albo tytułu.
    """
    n = len(blocks)
    while True:
        while pos < n and not is_category_id(blocks[pos], chapter):
            pos += 1
        if pos >= n:
            return None, n

        category_id = blocks[pos].strip()
        id_pos = pos
        pos = _skip_blank(blocks, pos + 1)
        if pos >= n:
            _note(diagnostics, DiagnosticCode.CATEGORY_NO_TITLE, id_pos,
                  f"Kategoria {category_id} bez tytułu na końcu dokumentu")
            return None, n
        if not is_boundary(blocks[pos], chapter):
            return CategoryBoundary(id=category_id, title=blocks[pos]), pos + 1

        _note(diagnostics, DiagnosticCode.CATEGORY_NO_TITLE, id_pos,
              f"Kategoria {category_id} bez tytułu, za nią od razu {blocks[pos].strip()}")


def _parse_term(
    blocks: Sequence[TextBlock],
    pos: int,
    chapter: str,
    diagnostics: Diagnostics,
) -> tuple[Term | None, int]:
    """
    Parsuje hasło; `pos` wskazuje blok z identyfikatorem "3.N.M".

    Faza nazwy: bloki do granicy lub do pierwszego bloku z sygnałami
    definicji. Faza treści: ContentClassifier do następnej granicy.
    Zwraca (None, pos) dla hasła bez nazwy lub bez definicji.
    """
    n = len(blocks)
    term_id = blocks[pos].strip()
    id_pos = pos
    pos += 1

    # Faza nazwy
    name_parts: list[str] = []
    while pos < n:
        block = blocks[pos]
        if _is_blank(block):
            pos += 1
            continue
        if is_boundary(block, chapter) or not _is_name_block(block, name_parts):
            break
        name_parts.append(block)
        pos += 1

    # Faza treści
    classifier = ContentClassifier()
    while pos < n:
        block = blocks[pos]
        if _is_blank(block):
            pos += 1
            continue
        if is_boundary(block, chapter):
            break
        classifier.feed(block)
        pos += 1
    content = classifier.finish()

    name = join_name(name_parts)
    if not name:
        _note(diagnostics, DiagnosticCode.TERM_NO_NAME, id_pos,
              f"Hasło {term_id} bez nazwy — pominięte")
        return None, pos
    if not content.definition.strip():
        _note(diagnostics, DiagnosticCode.TERM_NO_DEFINITION, id_pos,
              f"Hasło {term_id} ({name}) bez definicji — pominięte")
        return None, pos

    term, english = split_bilingual(name)
    return Term(
        id=term_id,
        term=term,
        english_term=english,
        definition=content.definition,
        notes=content.notes,
        examples=content.examples,
        remark=content.remark,
    ), pos


def _is_name_block(block: TextBlock, name_parts: list[str]) -> bool:
    kind = classify_block(block)
    if kind is BlockKind.NAME:
        return True
    # "（quality）" w osobnym bloku za nazwą — część nazwy, nie uwaga,
    # nazwa z gotową formą w nawiasie kończy fazę nazwy
    if kind is not BlockKind.REMARK or not name_parts:
        return False
    return is_latin_gloss(block) and not join_name(name_parts).endswith(("）", ")"))


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _check_cursor(start: int, pos: int, n: int) -> None:
    if pos < start or pos > n:
        raise CursorError(f"Nieprawidłowa pozycja kursora: {start} → {pos} (bloków: {n})")


def _note(
    diagnostics: Diagnostics,
    code: DiagnosticCode,
    position: int,
    message: str,
) -> None:
    if diagnostics is not None:
        diagnostics.append(Diagnostic(code=code, position=position, message=message))
