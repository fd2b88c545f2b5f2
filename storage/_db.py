"""
Połączenie psycopg2 dla magazynu PostgresStore (VN3SUM_STORE=postgres).

Parametry z PGHOST / PGPORT / PGDATABASE / PGUSER / PGPASSWORD (także z .env);
tabela kv_slot tworzona jest przez PostgresStore przy pierwszym użyciu.
"""

from __future__ import annotations

import os
import psycopg2

from storage import _env  # noqa: F401  (wczytuje .env)


def get_connection() -> psycopg2.extensions.connection:
    return psycopg2.connect(
        host     = os.getenv("PGHOST",     "localhost"),
        port     = int(os.getenv("PGPORT", "5432")),
        dbname   = os.getenv("PGDATABASE", "vn3sum"),
        user     = os.getenv("PGUSER",     "vn3sum"),
        password = os.getenv("PGPASSWORD", "vn3sum"),
    )
