"""
structurer/term_name.py — rekonstrukcja nazwy hasła i podział dwujęzyczny.

  "品質（quality）"                         → ("品質", "quality")
  "適合（conformity），合致（conformance）" → ("適合、合致", "conformity, conformance")
  "組織的品質方針"                          → ("組織的品質方針", None)
"""

from __future__ import annotations

import re

# Separator w nazwie po normalizacji
TERM_SEPARATOR = "、"
ENGLISH_SEPARATOR = ", "

_SEPARATORS = ",，、"
_SEPARATOR_RE = re.compile(rf"\s*[{_SEPARATORS}]\s*")

# Pojedyncza para: <podstawowa>（<angielska>）
_PAIR_RE = re.compile(r"^(?P<primary>[^（(]+?)\s*[（(](?P<secondary>[^（()）]+)[）)]$")

# Wiele par: ")…,…(" — po zamknięciu nawiasu separator i kolejne otwarcie
_MULTI_RE = re.compile(rf"[）)]\s*[{_SEPARATORS}][^（(]*[（(]")


def join_name(parts: list[str]) -> str:
    """Fragmenty nazwy sklejane bez separatora."""
    return "".join(p.strip() for p in parts)


def normalize_separators(text: str) -> str:
    return _SEPARATOR_RE.sub(TERM_SEPARATOR, text.strip())


def _split_top_level(name: str) -> list[str]:
    """Dzieli nazwę po separatorach leżących poza nawiasami."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in name:
        if ch in "（(":
            depth += 1
        elif ch in "）)":
            depth = max(0, depth - 1)
        if depth == 0 and ch in _SEPARATORS:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    parts.append("".join(current).strip())
    return [p for p in parts if p]


def split_bilingual(name: str) -> tuple[str, str | None]:
    """
    Zwraca (term, english_term).

    Podział na wiele par tylko gdy wzorzec ")…,…(" występuje w nazwie;
    w przeciwnym razie próbujemy prostego dopasowania jednej pary.
    Bez formy w nawiasie: nazwa dosłownie, z ujednoliconymi separatorami.
    """
    name = name.strip()

    if _MULTI_RE.search(name):
        terms: list[str] = []
        english: list[str] = []
        for part in _split_top_level(name):
            m = _PAIR_RE.match(part)
            if m:
                terms.append(m.group("primary").strip())
                english.append(m.group("secondary").strip())
            else:
                terms.append(part)
        return TERM_SEPARATOR.join(terms), ENGLISH_SEPARATOR.join(english) or None

    m = _PAIR_RE.match(name)
    if m:
        primary = normalize_separators(m.group("primary"))
        secondary = _SEPARATOR_RE.sub(ENGLISH_SEPARATOR, m.group("secondary").strip())
        return primary, secondary or None

    return normalize_separators(name), None
