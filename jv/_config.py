"""
Konfiguracja jv — zmienne środowiskowe (opcjonalnie z pliku .env).

  JV_OUTPUT_DIR     katalog wyjściowy JSON          (domyślnie: output)
  JV_DEFAULT_TITLE  tytuł, gdy dokument go nie ma   (domyślnie: 用語集)
  JV_CHAPTER        numer rozdziału słownika        (domyślnie: 3)
  JV_SORT           1/true → sortuj po numerach id  (domyślnie: wyłączone)
  JV_HTTP_TIMEOUT   timeout pobierania w sekundach  (domyślnie: 30)

Flagi CLI mają pierwszeństwo przed zmiennymi środowiskowymi.
"""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

_ENV_FILE = pathlib.Path(__file__).resolve().parent.parent / ".env"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class Settings:
    output_dir: pathlib.Path
    default_title: str
    chapter: str
    sort: bool
    http_timeout: float


def _float_env(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} musi być liczbą, otrzymano: '{raw}'") from None


def load_settings() -> Settings:
    """Wczytuje ustawienia; ValueError gdy wartość zmiennej jest nieprawidłowa."""
    load_dotenv(_ENV_FILE, override=False)
    return Settings(
        output_dir    = pathlib.Path(os.getenv("JV_OUTPUT_DIR", "output")),
        default_title = os.getenv("JV_DEFAULT_TITLE", "用語集"),
        chapter       = os.getenv("JV_CHAPTER", "3"),
        sort          = os.getenv("JV_SORT", "").strip().lower() in _TRUE_VALUES,
        http_timeout  = _float_env("JV_HTTP_TIMEOUT", "30"),
    )
