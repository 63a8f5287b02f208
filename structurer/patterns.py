"""
structurer/patterns.py — wzorce do rozpoznawania bloków słownika.

Identyfikatory:
  "3.N"    — kategoria (gołe numerowanie, nic poza nim w bloku)
  "3.N.M"  — hasło

Klasyfikacja bloku treści odbywa się przez uporządkowaną tabelę reguł
BLOCK_RULES; reguły są testowane w kolejności, pierwsza pasująca wygrywa.
Blok, którego nie dopasowała żadna reguła, jest klasyfikowany jako NAME
(może być fragmentem nazwy hasła albo kontynuacją bieżącej treści).
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable

DEFAULT_CHAPTER = "3"


class BlockKind(StrEnum):
    REMARK     = "remark"       # cały blok w nawiasach
    NOTE       = "note"         # "注記", "注記1 …"
    EXAMPLE    = "example"      # "例", "例1 …"
    DEFINITION = "definition"   # proza objaśniająca
    NAME       = "name"         # brak sygnałów — fragment nazwy / kontynuacja


# ---------------------------------------------------------------------------
# Identyfikatory
# ---------------------------------------------------------------------------

@functools.lru_cache(maxsize=8)
def _id_patterns(chapter: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    if not chapter.isdigit():
        raise ValueError(f"Nieprawidłowy numer rozdziału: '{chapter}'")
    ch = re.escape(chapter)
    return (
        re.compile(rf"^{ch}\.\d+$"),
        re.compile(rf"^{ch}\.\d+\.\d+$"),
    )


def is_category_id(text: str, chapter: str = DEFAULT_CHAPTER) -> bool:
    return _id_patterns(chapter)[0].match(text.strip()) is not None


def is_term_id(text: str, chapter: str = DEFAULT_CHAPTER) -> bool:
    return _id_patterns(chapter)[1].match(text.strip()) is not None


def is_boundary(text: str, chapter: str = DEFAULT_CHAPTER) -> bool:
    return is_category_id(text, chapter) or is_term_id(text, chapter)


# ---------------------------------------------------------------------------
# Markery i nawiasy
# ---------------------------------------------------------------------------

# Marker z opcjonalnym numerem, np. "注記1 ", "例 2：", "例"
NOTE_MARKER_RE    = re.compile(r"^注記\s*\d*\s*[:：]?\s*")
EXAMPLE_MARKER_RE = re.compile(r"^例\s*(?:\d+\s*[:：]?\s*|[\s:：]+|$)")

# Pary nawiasów uznawane za "uwagę" (remark) gdy obejmują cały blok.
BRACKET_PAIRS: dict[str, str] = {
    "（": "）",
    "(": ")",
    "〔": "〕",
    "［": "］",
    "[": "]",
}


def bracket_inner(text: str) -> str | None:
    """
    Zwraca wnętrze bloku, jeśli cały blok jest objęty jedną parą nawiasów.

    "（ISO 9001 参照）" → "ISO 9001 参照"
    "（a）と（b）"       → None  (pierwszy nawias zamyka się przed końcem)
    """
    if len(text) < 2:
        return None
    opening = text[0]
    closing = BRACKET_PAIRS.get(opening)
    if closing is None or text[-1] != closing:
        return None
    depth = 0
    for i, ch in enumerate(text):
        if ch == opening:
            depth += 1
        elif ch == closing:
            depth -= 1
            if depth == 0 and i != len(text) - 1:
                return None
    if depth != 0:
        return None
    return text[1:-1].strip()


_LATIN_GLOSS_RE = re.compile(r"^[A-Za-z][A-Za-z0-9 ,;:'’/&.\-]*$")


def is_latin_gloss(text: str) -> bool:
    """
    Blok w nawiasach z samym tekstem łacińskim, np. "（quality）" —
    angielski odpowiednik nazwy przeniesiony do osobnego bloku.
    """
    inner = bracket_inner(text.strip())
    return bool(inner) and _LATIN_GLOSS_RE.match(inner) is not None


def strip_marker(text: str, kind: BlockKind) -> str:
    """Usuwa marker klasyfikacji wraz z numerem z początku tekstu."""
    if kind is BlockKind.NOTE:
        return NOTE_MARKER_RE.sub("", text, count=1).strip()
    if kind is BlockKind.EXAMPLE:
        return EXAMPLE_MARKER_RE.sub("", text, count=1).strip()
    return text.strip()


# ---------------------------------------------------------------------------
# Tabela reguł
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BlockRule:
    name: str
    test: Callable[[str], bool]
    kind: BlockKind


def _r(pattern: str) -> Callable[[str], bool]:
    regex = re.compile(pattern)
    return lambda text: regex.search(text) is not None


BLOCK_RULES: list[BlockRule] = [
    BlockRule("remark",  lambda t: bracket_inner(t) is not None, BlockKind.REMARK),
    BlockRule("note",    _r(NOTE_MARKER_RE.pattern),             BlockKind.NOTE),
    BlockRule("example", _r(EXAMPLE_MARKER_RE.pattern),          BlockKind.EXAMPLE),
    # odsyłacz do innego hasła: "要求事項（3.6.4）"
    BlockRule("cross_ref", _r(r"[（(]\s*\d+(?:\.\d+)+\s*[）)]"), BlockKind.DEFINITION),
    # koniec zdania
    BlockRule("sentence", _r(r"[。．]"),                          BlockKind.DEFINITION),
    # typowe zakończenia prozy objaśniającej
    BlockRule(
        "prose_ending",
        _r(r"(をいう|をいい|という|であって|である|ている|される|された|のこと)"),
        BlockKind.DEFINITION,
    ),
    # partykuła tematu/podmiotu przed przecinkiem — zdanie, nie nazwa
    BlockRule("particle_comma", _r(r"[はがを]、"),               BlockKind.DEFINITION),
]


def classify_block(text: str) -> BlockKind:
    """Klasyfikuje blok wg BLOCK_RULES; brak dopasowania → NAME."""
    stripped = text.strip()
    for rule in BLOCK_RULES:
        if rule.test(stripped):
            return rule.kind
    return BlockKind.NAME
