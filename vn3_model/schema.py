"""
vn3_model/schema.py — schemat JSON pliku konfiguracji (import z pliku).

Sprawdzana jest tylko struktura; nieznane grupy i klucze pozycji są
dozwolone (Configuration.from_dict je przenosi bez zmian).
"""

from __future__ import annotations

from typing import Any

import jsonschema

_RULE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "pattern": {"type": "string"},
        "short": {"type": "string"},
    },
    "required": ["pattern", "short"],
}

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "prefix": {"type": "string"},
        "separator": {"type": "string"},
        "mappings": {
            "type": "object",
            "additionalProperties": {"type": "array", "items": _RULE_SCHEMA},
        },
        "groups": {
            "type": "object",
            "additionalProperties": {"type": "boolean"},
        },
        "labels": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
    },
}


def config_errors(data: Any) -> list[str]:
    """Lista naruszeń schematu w postaci "/ścieżka: komunikat"; pusta = OK."""
    validator = jsonschema.Draft202012Validator(CONFIG_SCHEMA)
    errors: list[str] = []
    for e in validator.iter_errors(data):
        path = (
            "/" + "/".join(str(p) for p in e.absolute_path)
            if e.absolute_path
            else "/"
        )
        errors.append(f"{path}: {e.message}")
    return errors
