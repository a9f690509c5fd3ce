from __future__ import annotations

from pathlib import Path

from .config import GeneratorConfig
from .core.context import RunContext
from .core.errors import EXTERNAL_TOOL_FAILURE, Failure
from .core.logging import log_event
from .core.paths import repo_relative
from .core.process import run_command

FORMATTER_TIMEOUT_SECONDS = 300


def run_formatter(ctx: RunContext, config: GeneratorConfig, paths: list[Path]) -> Failure | None:
    """Run the configured formatter over `paths`; a failure is reported, never raised."""
    if not config.formatter or not paths:
        log_event(ctx, "info", "formatter", "skipped", reason="disabled" if not config.formatter else "no documents")
        return None
    targets = [repo_relative(ctx.repo_root, path) for path in paths]
    cmd = [*config.formatter, *targets]
    try:
        result = run_command(cmd, ctx.repo_root, timeout_seconds=FORMATTER_TIMEOUT_SECONDS)
    except OSError as exc:
        failure = Failure(EXTERNAL_TOOL_FAILURE, config.formatter[0], f"could not start formatter: {exc}")
        log_event(ctx, "warning", "formatter", "failed", path=failure.path, error=failure.message)
        return failure
    if result.code != 0:
        failure = Failure(
            EXTERNAL_TOOL_FAILURE,
            config.formatter[0],
            f"formatter exited with {result.code}: {result.combined_output or 'no output'}",
        )
        log_event(ctx, "warning", "formatter", "failed", path=failure.path, error=failure.message)
        return failure
    log_event(ctx, "info", "formatter", "done", files=len(targets), duration_ms=result.duration_ms)
    return None
