"""
storage/_env.py — ustawienia środowiska vn3sum.

Zmienne środowiskowe (opcjonalnie z pliku .env w katalogu projektu):
  VN3SUM_STORE          json | postgres        (domyślnie: json)
  VN3SUM_HOME           katalog magazynu JSON  (domyślnie: ~/.vn3sum)
  VN3SUM_RELAY_URL      szablon relay dla pobierania z URL (domyślnie: brak)
  VN3SUM_FETCH_TIMEOUT  limit czasu pobierania w sekundach (domyślnie: 30)
  PGHOST, PGPORT, PGDATABASE, PGUSER, PGPASSWORD — dla VN3SUM_STORE=postgres
"""

from __future__ import annotations

import os
import pathlib

from dotenv import load_dotenv

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env")

STORE_JSON = "json"
STORE_POSTGRES = "postgres"


def store_backend() -> str:
    backend = os.getenv("VN3SUM_STORE", STORE_JSON).strip().lower()
    if backend not in (STORE_JSON, STORE_POSTGRES):
        raise ValueError(
            f"Nieznany magazyn VN3SUM_STORE='{backend}' "
            f"(dozwolone: {STORE_JSON}, {STORE_POSTGRES})"
        )
    return backend


def data_dir() -> pathlib.Path:
    home = os.getenv("VN3SUM_HOME")
    return pathlib.Path(home).expanduser() if home else pathlib.Path.home() / ".vn3sum"


def relay_template() -> str | None:
    return os.getenv("VN3SUM_RELAY_URL") or None


def fetch_timeout() -> float:
    return float(os.getenv("VN3SUM_FETCH_TIMEOUT", "30"))
