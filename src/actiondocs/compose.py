from __future__ import annotations

import unicodedata
from typing import Iterable

from .config import GeneratorConfig
from .core.context import RunContext
from .examples import usage_example
from .models import ActionRecord
from .tables import render


# Primary order of whitespace and punctuation in the root collation table.
_PUNCTUATION_ORDER = " \t_-,;:!?.\x27\"()[]{}@*/\\&#%`^+<=>|~$"
_PUNCTUATION_RANK = {ch: rank for rank, ch in enumerate(_PUNCTUATION_ORDER)}


def _primary_weight(ch: str) -> tuple[int, int]:
    if ch in _PUNCTUATION_RANK:
        return 0, _PUNCTUATION_RANK[ch]
    if ch.isdigit():
        return 2, ord(ch)
    if ch.isalpha():
        return 3, ord(ch)
    return 1, ord(ch)


def collation_key(name: str) -> tuple[tuple[tuple[int, int], ...], str]:
    """Sort key approximating locale collation.

    Whitespace and punctuation sort before digits, digits before letters;
    accents and case only break ties, lowercase first.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return tuple(_primary_weight(ch) for ch in base), name.swapcase()


def sort_records(records: Iterable[ActionRecord]) -> list[ActionRecord]:
    return sorted(records, key=lambda record: collation_key(record.display_name))


def compose(record: ActionRecord, example: str) -> str:
    parts = [
        f"### [{record.display_name}](./{record.identifier}/)",
        record.description,
        f"**Inputs:**\n\n{render(record.inputs, 'inputs')}",
    ]
    if record.outputs:
        parts.append(f"**Outputs:**\n\n{render(record.outputs, 'outputs')}")
    parts.append(f"**Usage:**\n\n```yaml\n{example}\n```")
    return "\n\n".join(parts)


def compose_all(records: Iterable[ActionRecord], config: GeneratorConfig, ctx: RunContext | None = None) -> str:
    sections = [compose(record, usage_example(record, config, ctx)) for record in sort_records(records)]
    return "\n\n".join(sections).rstrip()
