from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from .config import GeneratorConfig
from .core.errors import NOT_FOUND, PARSE_ERROR, Failure
from .core.result import Err, Ok, Result
from .core.yaml_utils import load_yaml
from .models import DEFAULT_DESCRIPTION, ActionRecord, InputSpec, OutputSpec


def discover_units(repo_root: Path, config: GeneratorConfig) -> list[Path]:
    units: list[Path] = []
    for entry in sorted(repo_root.iterdir(), key=lambda p: p.name):
        if not entry.is_dir():
            continue
        if entry.name.startswith(".") or entry.name in config.excluded_dirs:
            continue
        if (entry / config.definition_file).is_file():
            units.append(entry)
    return units


def load(unit_path: Path, config: GeneratorConfig) -> Result[ActionRecord, Failure]:
    definition = unit_path / config.definition_file
    if not definition.is_file():
        return Err(Failure(NOT_FOUND, str(definition), "definition file not found"))
    try:
        data = load_yaml(definition)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        return Err(Failure(PARSE_ERROR, str(definition), str(exc)))
    if not isinstance(data, dict):
        return Err(Failure(PARSE_ERROR, str(definition), "definition root must be a mapping"))
    identifier = unit_path.name
    return Ok(
        ActionRecord(
            identifier=identifier,
            path=unit_path,
            display_name=_text(data.get("name")) or identifier,
            description=_text(data.get("description")) or DEFAULT_DESCRIPTION,
            inputs=MappingProxyType(_inputs(data.get("inputs"))),
            outputs=MappingProxyType(_outputs(data.get("outputs"))),
        )
    )


def _inputs(raw: Any) -> dict[str, InputSpec]:
    if not isinstance(raw, dict):
        return {}
    inputs: dict[str, InputSpec] = {}
    for name, entry in raw.items():
        entry = entry if isinstance(entry, dict) else {}
        inputs[str(name)] = InputSpec(
            description=_text(entry.get("description")),
            required=_flag(entry.get("required")),
            default=_scalar(entry.get("default")),
        )
    return inputs


def _outputs(raw: Any) -> dict[str, OutputSpec]:
    if not isinstance(raw, dict):
        return {}
    return {
        str(name): OutputSpec(description=_text(entry.get("description") if isinstance(entry, dict) else None))
        for name, entry in raw.items()
    }


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def _scalar(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
