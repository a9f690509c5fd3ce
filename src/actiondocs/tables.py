from __future__ import annotations

from typing import Literal, Mapping, Union

from .models import InputSpec, OutputSpec

TableKind = Literal["inputs", "outputs"]

_HEADERS: dict[str, tuple[str, str]] = {
    "inputs": (
        "| Input | Description | Required | Default |",
        "|-------|-------------|----------|---------|",
    ),
    "outputs": (
        "| Output | Description |",
        "|--------|-------------|",
    ),
}


def _cell(text: str) -> str:
    return " ".join(text.replace("|", "\\|").split())


def _row(name: str, spec: Union[InputSpec, OutputSpec]) -> str:
    description = _cell(spec.description) or "No description"
    if isinstance(spec, InputSpec):
        required = "Yes" if spec.required else "No"
        default = f"`{spec.default}`" if spec.default else "-"
        return f"| `{name}` | {description} | {required} | {default} |"
    return f"| `{name}` | {description} |"


def render(fields: Mapping[str, Union[InputSpec, OutputSpec]], kind: TableKind) -> str:
    if not fields:
        return f"*No {kind}*"
    header, separator = _HEADERS[kind]
    rows = [_row(name, spec) for name, spec in fields.items()]
    return "\n".join([header, separator, *rows])
