from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

OutputFormat = Literal["text", "json"]


def make_run_id(prefix: str = "action-docs") -> str:
    return f"{prefix}-{datetime.now(timezone.utc).strftime('%Y%m%d-%H%M%S')}"


@dataclass(frozen=True)
class RunContext:
    run_id: str
    repo_root: Path
    output_format: OutputFormat
    quiet: bool

    @property
    def log_json(self) -> bool:
        return self.output_format == "json"

    @classmethod
    def from_args(
        cls,
        repo_root: str | None,
        output_format: OutputFormat = "text",
        quiet: bool = False,
        run_id: str | None = None,
    ) -> "RunContext":
        root = Path(repo_root) if repo_root else Path.cwd()
        return cls(
            run_id=run_id or make_run_id(),
            repo_root=root.resolve(),
            output_format=output_format,
            quiet=quiet,
        )
