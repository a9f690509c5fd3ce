from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

DEFAULT_DESCRIPTION = "No description available"


@dataclass(frozen=True)
class InputSpec:
    description: str = ""
    required: bool = False
    default: str | None = None


@dataclass(frozen=True)
class OutputSpec:
    description: str = ""


@dataclass(frozen=True)
class ActionRecord:
    identifier: str
    path: Path
    display_name: str
    description: str = DEFAULT_DESCRIPTION
    inputs: Mapping[str, InputSpec] = field(default_factory=dict)
    outputs: Mapping[str, OutputSpec] = field(default_factory=dict)
