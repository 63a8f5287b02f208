"""html_parser/parser.py — linearyzacja dokumentu HTML/XML do bloków tekstu."""

from __future__ import annotations

import re

import requests
from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from data_model.vocabulary import BlockSequence

# Tagi blokowe (determinują granice bloków treści)
_HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
_BLOCK_TAGS: set[str] = {
    "div", "p", "article", "section", "main", "aside", "nav",
    "header", "footer", "blockquote",
    "li", "ul", "ol", "dl", "dt", "dd",
    "td", "th", "tr", "table", "caption",
    "form", "fieldset", "details", "summary",
    "body", "html",
    # WordprocessingML (document.xml z .docx): akapit = w:p
    "w:p", "w:body", "w:tbl", "w:tr", "w:tc",
} | _HEADING_TAGS

# Tagi zawierające szum (nie treść)
_NOISE_TAGS = {"script", "style", "noscript", "title"}

# Twarde złamanie linii w akapicie — granica bloku
_BREAK_TAGS = {"br"}

_WS_RE = re.compile(r"\s+")

# Złamanie linii między dwoma znakami CJK to artefakt źródła, nie spacja.
# Zwykłe spacje zostają: "例 ある…", "注記1 …" muszą zachować separator markera.
_CJK = r"　-〿぀-ヿ㐀-䶿一-鿿＀-￯"
_CJK_BREAK_RE = re.compile(rf"([{_CJK}])[ \t　]*[\r\n]\s*(?=[{_CJK}])")

_DEFAULT_TIMEOUT = 30


class ExtractionError(Exception):
    """Wejścia nie da się w ogóle sparsować jako znaczników."""


def _clean_text(text: str) -> str:
    """Usuwa złamania linii między znakami CJK, zwija białe znaki, trimuje."""
    text = _CJK_BREAK_RE.sub(r"\1", text)
    text = _WS_RE.sub(" ", text)
    return text.strip()


def _is_container(node: object) -> bool:
    """Tag blokowy lub zawierający gdziekolwiek w środku tag blokowy."""
    if not isinstance(node, Tag):
        return False
    return node.name in _BLOCK_TAGS or node.find(_BLOCK_TAGS) is not None


def _inline_text(node: object) -> str:
    # Komentarze, doctype, CDATA itp. nie są treścią
    if isinstance(node, PreformattedString):
        return ""
    if isinstance(node, NavigableString):
        return str(node)
    if isinstance(node, Tag):
        if node.name in _NOISE_TAGS:
            return ""
        return "".join(_inline_text(c) for c in node.children)
    return ""


def _extract_blocks(root: Tag) -> BlockSequence:
    """
    Przechodzi drzewo DOM i zwraca spłaszczoną listę tekstów bloków.

    Reguła unikania duplikowania treści:
    - Blok liściasty (brak blokowych potomków): emituje cały swój tekst.
    - Kontener (ma blokowych potomków): rekuruje w dzieci; luźny tekst
      inline pomiędzy blokowymi dziećmi tworzy osobny blok.
    - <br> bezpośrednio w bloku dzieli jego tekst na osobne bloki.
    """
    blocks: BlockSequence = []

    def emit(parts: list[str]) -> None:
        text = _clean_text("".join(parts))
        if text:
            blocks.append(text)

    def walk(el: Tag) -> None:
        if el.name in _NOISE_TAGS:
            return
        run: list[str] = []
        for child in el.children:
            if _is_container(child):
                emit(run)
                run = []
                walk(child)  # type: ignore[arg-type]
            elif isinstance(child, Tag) and child.name in _BREAK_TAGS:
                emit(run)
                run = []
            else:
                run.append(_inline_text(child))
        emit(run)

    walk(root)
    return blocks


def _parse(raw: str | bytes) -> BeautifulSoup:
    if not isinstance(raw, (str, bytes)):
        raise ExtractionError(
            f"Oczekiwano tekstu znaczników (str/bytes), otrzymano: {type(raw).__name__}"
        )
    try:
        return BeautifulSoup(raw, "html.parser")
    except Exception as e:
        raise ExtractionError(f"Nie udało się sparsować znaczników: {e}") from e


def extract_blocks(raw: str | bytes) -> BlockSequence:
    """
    Zwraca niepuste, przycięte bloki tekstu w kolejności dokumentu.

    Tolerancyjny: nieregularne znaczniki dają tyle bloków, ile się da.
    ExtractionError tylko gdy wejście nie jest tekstem lub parser zawiedzie.
    """
    soup = _parse(raw)
    for tag in soup.find_all(_NOISE_TAGS):
        tag.decompose()
    root: Tag = soup.find("body") or soup  # type: ignore[assignment]
    return _extract_blocks(root)


def extract_title(raw: str | bytes) -> str | None:
    """Tytuł dokumentu: element <title>, a gdy go brak — pierwszy <h1>."""
    soup = _parse(raw)
    for name in ("title", "h1"):
        el = soup.find(name)
        if el is not None:
            text = _clean_text(el.get_text())
            if text:
                return text
    return None


def fetch_markup(url: str, timeout: float = _DEFAULT_TIMEOUT) -> str:
    """Pobiera dokument HTML spod podanego URL."""
    headers = {
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        )
    }
    try:
        resp = requests.get(url, timeout=timeout, headers=headers)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise ExtractionError(f"Błąd pobierania {url}: {e}") from e
    resp.encoding = resp.apparent_encoding or "utf-8"
    return resp.text
