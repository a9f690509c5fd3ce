from __future__ import annotations

import json
from pathlib import Path

import jsonschema


def load_json(path: Path) -> dict[str, object]:
    return json.loads(path.read_text(encoding="utf-8"))


def schema_errors(payload: object, schema_path: Path) -> list[str]:
    schema = load_json(schema_path)
    validator = jsonschema.Draft202012Validator(schema)
    errors: list[str] = []
    for err in sorted(validator.iter_errors(payload), key=lambda e: [str(part) for part in e.absolute_path]):
        where = "/".join(str(part) for part in err.absolute_path) or "<root>"
        errors.append(f"{where}: {err.message}")
    return errors
