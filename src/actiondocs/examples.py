from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping

from .config import GeneratorConfig
from .core.context import RunContext
from .core.logging import log_event
from .models import ActionRecord, InputSpec

# Body of a ```yaml fence that never runs past its own closing fence.
_FENCE_BODY = r"(?:(?!\n```).)*?"
_STEP_HEADER_RE = re.compile(r"^[ \t]*-[ \t]*(?:name|uses):", re.M)
_OPTIONAL_INPUT_LIMIT = 2


@dataclass(frozen=True)
class ExampleRule:
    rule_id: str
    pattern: Callable[[str], re.Pattern[str]]


def _rule(rule_id: str, pattern: Callable[[str], re.Pattern[str]]) -> ExampleRule:
    return ExampleRule(rule_id, pattern)


EXAMPLE_RULES: tuple[ExampleRule, ...] = (
    _rule(
        "usage-section",
        lambda _identifier: re.compile(r"## Usage.*?```yaml\n(" + _FENCE_BODY + r")\n```", re.I | re.S),
    ),
    _rule(
        "uses-path",
        lambda _identifier: re.compile(
            r"```yaml\n(" + _FENCE_BODY + r"uses:[ \t]*[.\w/-]+" + _FENCE_BODY + r")\n```",
            re.I | re.S,
        ),
    ),
    _rule(
        "uses-identifier",
        lambda identifier: re.compile(
            r"```yaml\n(" + _FENCE_BODY + r"uses:[^\n]*" + re.escape(identifier) + _FENCE_BODY + r")\n```",
            re.I | re.S,
        ),
    ),
)

# Example values for synthesized inputs; checked in order against the input name.
_VALUE_HINTS: tuple[tuple[str, str], ...] = (
    ("token", "${{ secrets.TOKEN_NAME }}"),
    ("version", "lts/*"),
    ("message", "Your message here"),
    ("tag", "tag-name"),
)


def match_example(text: str, identifier: str) -> tuple[str, str] | None:
    """Return `(rule_id, captured text)` for the first rule matching `text`."""
    for rule in EXAMPLE_RULES:
        match = rule.pattern(identifier).search(text)
        if match and match.group(1).strip():
            return rule.rule_id, match.group(1).strip()
    return None


def wrap_example(example: str, identifier: str, config: GeneratorConfig) -> str:
    if _STEP_HEADER_RE.search(example):
        return example
    indented = "\n".join(f"  {line}" for line in example.split("\n"))
    return f"{config.invocation(identifier)}\n{indented}"


def extract(unit_path: Path, identifier: str, config: GeneratorConfig) -> str | None:
    readme = unit_path / config.readme_file
    if not readme.is_file():
        return None
    matched = match_example(readme.read_text(encoding="utf-8"), identifier)
    if matched is None:
        return None
    return wrap_example(matched[1], identifier, config)


def example_value(name: str, spec: InputSpec) -> str:
    for keyword, value in _VALUE_HINTS:
        if keyword in name:
            return value
    if spec.default:
        return spec.default
    return "value"


def synthesize(identifier: str, inputs: Mapping[str, InputSpec], config: GeneratorConfig) -> str:
    lines = [config.invocation(identifier)]
    if inputs:
        required = [name for name, spec in inputs.items() if spec.required]
        optional = [name for name, spec in inputs.items() if not spec.required]
        lines.append("  with:")
        for name in [*required, *optional[:_OPTIONAL_INPUT_LIMIT]]:
            lines.append(f"    {name}: {example_value(name, inputs[name])}")
    return "\n".join(lines)


def usage_example(record: ActionRecord, config: GeneratorConfig, ctx: RunContext | None = None) -> str:
    try:
        example = extract(record.path, record.identifier, config)
    except (OSError, UnicodeDecodeError) as exc:
        if ctx is not None:
            log_event(ctx, "warning", "examples", "readme_unreadable", path=record.path / config.readme_file, error=exc)
        example = None
    return example or synthesize(record.identifier, record.inputs, config)
