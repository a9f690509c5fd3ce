from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml

from .core.errors import INVALID_CONFIG, ScriptError
from .core.exit_codes import ERR_CONFIG
from .core.schema_utils import schema_errors
from .core.yaml_utils import load_yaml

DEFAULT_CONFIG_FILE = ".action-docs.yml"
CONFIG_SCHEMA = Path(__file__).resolve().parent / "schemas" / "config.schema.json"

ROOT_START_MARKER = "<!-- start action docs -->"
ROOT_END_MARKER = "<!-- end action docs -->"
INPUTS_START_MARKER = "<!-- start inputs -->"
INPUTS_END_MARKER = "<!-- end inputs -->"
OUTPUTS_START_MARKER = "<!-- start outputs -->"
OUTPUTS_END_MARKER = "<!-- end outputs -->"


@dataclass(frozen=True)
class GeneratorConfig:
    definition_file: str = "action.yml"
    readme_file: str = "README.md"
    excluded_dirs: tuple[str, ...] = ("node_modules",)
    action_repository: str = "codfish/actions"
    action_ref: str = "main"
    formatter: tuple[str, ...] = field(default=("npx", "prettier", "--write"))

    def invocation(self, identifier: str) -> str:
        return f"- uses: {self.action_repository}/{identifier}@{self.action_ref}"


def load_config(repo_root: Path, config_path: str | None = None) -> GeneratorConfig:
    """Build the generator config from defaults plus an optional YAML override file.

    An explicit path is taken relative to the working directory and must
    exist; the implicit `.action-docs.yml` is only read when present.
    """
    base = GeneratorConfig()
    if config_path:
        path = Path(config_path).resolve()
        if not path.is_file():
            raise ScriptError(f"config file not found: {path}", ERR_CONFIG, kind=INVALID_CONFIG)
    else:
        path = repo_root / DEFAULT_CONFIG_FILE
        if not path.is_file():
            return base
    try:
        payload = load_yaml(path)
    except yaml.YAMLError as exc:
        raise ScriptError(f"{path}: invalid YAML: {exc}", ERR_CONFIG, kind=INVALID_CONFIG) from exc
    if payload is None:
        return base
    errors = schema_errors(payload, CONFIG_SCHEMA)
    if errors:
        raise ScriptError(f"{path}: invalid config: {'; '.join(errors)}", ERR_CONFIG, kind=INVALID_CONFIG)
    overrides: dict[str, object] = {}
    for key, value in payload.items():
        overrides[key] = tuple(value) if isinstance(value, list) else value
    return replace(base, **overrides)
