"""
structurer/types.py — diagnostyka przebiegu strukturyzacji.

Anomalie (zabłąkany blok, pusta kategoria, hasło bez definicji…) nie są
błędami: strukturyzacja je pomija. Jeśli wywołujący poda listę
`diagnostics`, każda anomalia jest w niej zapisywana jako Diagnostic.

CursorError sygnalizuje naruszenie niezmiennika kursora — defekt
programistyczny, nie błąd danych wejściowych.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class DiagnosticCode(StrEnum):
    STRAY_BLOCK          = "W_STRAY_BLOCK"
    CATEGORY_NO_TITLE    = "W_CATEGORY_NO_TITLE"
    CATEGORY_EMPTY       = "W_CATEGORY_EMPTY"
    TERM_NO_NAME         = "W_TERM_NO_NAME"
    TERM_NO_DEFINITION   = "W_TERM_NO_DEFINITION"


@dataclass(slots=True)
class Diagnostic:
    """
    - code:     rodzaj anomalii
    - position: indeks bloku, przy którym ją wykryto
    - message:  czytelny opis
    """
    code: DiagnosticCode
    position: int
    message: str


class CursorError(RuntimeError):
    """Kursor cofnął się lub wyszedł poza sekwencję bloków."""
