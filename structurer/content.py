"""
structurer/content.py — klasyfikator treści hasła (automat stanów).

Stany: DEFINITION (początkowy), NOTE, EXAMPLE.
Niezależnie od stanu istnieje pojedynczy slot `remark`.

Dla każdego bloku:
  - blok w całości w nawiasach → flush, remark = wnętrze (stan bez zmian)
  - "注記…"                   → flush, stan NOTE, nowy bufor z tym blokiem
  - "例…"                     → flush, stan EXAMPLE, nowy bufor z tym blokiem
  - pozostałe                  → dopisanie do bufora (bez separatora)

flush() jest jedyną ścieżką przenoszenia bufora do miejsca docelowego —
używany przy każdej zmianie stanu i na końcu treści hasła.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from .patterns import BlockKind, bracket_inner, classify_block, strip_marker


class ContentState(StrEnum):
    DEFINITION = "definition"
    NOTE       = "note"
    EXAMPLE    = "example"


_STATE_KIND: dict[ContentState, BlockKind] = {
    ContentState.DEFINITION: BlockKind.DEFINITION,
    ContentState.NOTE:       BlockKind.NOTE,
    ContentState.EXAMPLE:    BlockKind.EXAMPLE,
}


@dataclass(slots=True)
class TermContent:
    definition: str = ""
    notes: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)
    remark: str | None = None


def flush(state: ContentState, buffer: list[str], content: TermContent) -> None:
    """Przenosi zawartość bufora do miejsca docelowego stanu i czyści bufor."""
    text = "".join(buffer)
    buffer.clear()
    if not text:
        return
    if state is ContentState.DEFINITION:
        content.definition += text
        return
    text = strip_marker(text, _STATE_KIND[state])
    if not text:
        return
    if state is ContentState.NOTE:
        content.notes.append(text)
    else:
        content.examples.append(text)


class ContentClassifier:
    """Akumulator treści jednego hasła; bloki podawane przez feed()."""

    __slots__ = ("state", "buffer", "content")

    def __init__(self) -> None:
        self.state = ContentState.DEFINITION
        self.buffer: list[str] = []
        self.content = TermContent()

    def feed(self, block: str) -> None:
        kind = classify_block(block)

        if kind is BlockKind.REMARK:
            flush(self.state, self.buffer, self.content)
            inner = bracket_inner(block.strip())
            if inner:
                self.content.remark = inner
        elif kind is BlockKind.NOTE:
            self._switch(ContentState.NOTE, block)
        elif kind is BlockKind.EXAMPLE:
            self._switch(ContentState.EXAMPLE, block)
        else:
            self.buffer.append(block)

    def finish(self) -> TermContent:
        flush(self.state, self.buffer, self.content)
        return self.content

    def _switch(self, state: ContentState, block: str) -> None:
        flush(self.state, self.buffer, self.content)
        self.state = state
        self.buffer.append(block)
