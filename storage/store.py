"""
storage/store.py — magazyn klucz-wartość dla konfiguracji i historii.

Każdy slot przechowuje jedną wartość JSON, zapisywaną zawsze w całości
(ostatni zapis wygrywa, bez transakcji między slotami).

Implementacje:
  JsonFileStore  — plik <katalog>/<slot>.json
  PostgresStore  — tabela kv_slot(slot, value jsonb) przez psycopg2

Publiczne API:
  open_store()   -> KeyValueStore  (wg VN3SUM_STORE)
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Protocol

from storage import _env

logger = logging.getLogger(__name__)

CONFIG_SLOT = "vn3_config"
HISTORY_SLOT = "vn3_history"


class KeyValueStore(Protocol):
    def load(self, slot: str) -> Any | None: ...

    def save(self, slot: str, value: Any) -> None: ...

    def delete(self, slot: str) -> None: ...


# ---------------------------------------------------------------------------
# Pliki JSON
# ---------------------------------------------------------------------------

class JsonFileStore:
    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _path(self, slot: str) -> Path:
        return self.directory / f"{slot}.json"

    def load(self, slot: str) -> Any | None:
        path = self._path(slot)
        if not path.exists():
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    def save(self, slot: str, value: Any) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(value, ensure_ascii=False, indent=2)
        # zapis przez plik tymczasowy, żeby nie zostawić uciętego JSON
        fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=f".{slot}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp, self._path(slot))
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.debug("Zapisano slot %s → %s", slot, self._path(slot))

    def delete(self, slot: str) -> None:
        self._path(slot).unlink(missing_ok=True)


# ---------------------------------------------------------------------------
# PostgreSQL
# ---------------------------------------------------------------------------

_CREATE_SQL = """
    CREATE TABLE IF NOT EXISTS kv_slot (
        slot       TEXT PRIMARY KEY,
        value      JSONB NOT NULL,
        updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
    )
"""

_UPSERT_SQL = """
    INSERT INTO kv_slot (slot, value)
    VALUES (%s, %s::jsonb)
    ON CONFLICT (slot) DO UPDATE SET
        value      = EXCLUDED.value,
        updated_at = now()
"""


class PostgresStore:
    """
    Sloty w tabeli kv_slot (tworzonej przy pierwszym użyciu).

    connect: fabryka połączeń psycopg2 (domyślnie storage._db.get_connection).
    """

    def __init__(self, connect: Callable[[], Any] | None = None) -> None:
        if connect is None:
            from storage._db import get_connection
            connect = get_connection
        self._connect = connect
        self._ready = False

    def _run(self, sql: str, params: tuple = (), fetch: bool = False) -> Any:
        conn = self._connect()
        try:
            with conn, conn.cursor() as cur:
                if not self._ready:
                    cur.execute(_CREATE_SQL)
                cur.execute(sql, params)
                row = cur.fetchone() if fetch else None
            # CREATE TABLE jest w tej samej transakcji; liczy się dopiero po commit
            self._ready = True
            return row
        finally:
            conn.close()

    def load(self, slot: str) -> Any | None:
        row = self._run("SELECT value FROM kv_slot WHERE slot = %s", (slot,), fetch=True)
        if row is None:
            return None
        value = row[0]
        # psycopg2 dekoduje jsonb; tekst tylko przy niestandardowych adapterach
        return json.loads(value) if isinstance(value, str) else value

    def save(self, slot: str, value: Any) -> None:
        self._run(_UPSERT_SQL, (slot, json.dumps(value, ensure_ascii=False)))
        logger.debug("Zapisano slot %s w kv_slot", slot)

    def delete(self, slot: str) -> None:
        self._run("DELETE FROM kv_slot WHERE slot = %s", (slot,))


def open_store() -> KeyValueStore:
    """Magazyn wybrany przez VN3SUM_STORE."""
    if _env.store_backend() == _env.STORE_POSTGRES:
        return PostgresStore()
    return JsonFileStore(_env.data_dir())
