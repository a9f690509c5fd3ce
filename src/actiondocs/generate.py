from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .compose import compose_all, sort_records
from .config import (
    INPUTS_END_MARKER,
    INPUTS_START_MARKER,
    OUTPUTS_END_MARKER,
    OUTPUTS_START_MARKER,
    ROOT_END_MARKER,
    ROOT_START_MARKER,
    GeneratorConfig,
)
from .core.context import RunContext
from .core.errors import IO_ERROR, NOT_FOUND, Failure, ScriptError
from .core.exit_codes import ERR_DOCS
from .core.logging import log_event
from .core.paths import repo_relative
from .core.result import Err
from .formatter import run_formatter
from .loader import discover_units, load
from .models import ActionRecord
from .splice import MarkerPair, document_buffer, splice_file
from .tables import render

ROOT_MARKERS = MarkerPair(ROOT_START_MARKER, ROOT_END_MARKER)
INPUT_MARKERS = MarkerPair(INPUTS_START_MARKER, INPUTS_END_MARKER)
OUTPUT_MARKERS = MarkerPair(OUTPUTS_START_MARKER, OUTPUTS_END_MARKER)


@dataclass
class GenerationReport:
    records: list[ActionRecord] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    failures: list[Failure] = field(default_factory=list)
    formatter_failure: Failure | None = None

    def as_payload(self, ctx: RunContext) -> dict[str, object]:
        return {
            "schema_version": 1,
            "tool": "action-docs",
            "status": "ok",
            "run_id": ctx.run_id,
            "repo_root": str(ctx.repo_root),
            "actions": [record.identifier for record in self.records],
            "written": [repo_relative(ctx.repo_root, path) for path in self.written],
            "failures": [{"kind": f.kind, "path": f.path, "message": f.message} for f in self.failures],
            "formatter": "ok" if self.formatter_failure is None else self.formatter_failure.message,
        }


def load_actions(ctx: RunContext, config: GeneratorConfig, report: GenerationReport) -> list[ActionRecord]:
    units = discover_units(ctx.repo_root, config)
    log_event(ctx, "info", "loader", "discovered", count=len(units), units=",".join(u.name for u in units))
    records: list[ActionRecord] = []
    for unit in units:
        result = load(unit, config)
        if isinstance(result, Err):
            log_event(ctx, "error", "loader", result.error.kind, path=result.error.path, error=result.error.message)
            report.failures.append(result.error)
            continue
        records.append(result.value)
    report.records = sort_records(records)
    return report.records


def root_document(ctx: RunContext, config: GeneratorConfig) -> Path:
    readme = ctx.repo_root / config.readme_file
    if not readme.is_file():
        raise ScriptError(f"{readme}: root document not found", ERR_DOCS, kind=NOT_FOUND)
    return readme


def generate_root_docs(ctx: RunContext, config: GeneratorConfig, report: GenerationReport) -> Path:
    """Splice every action's section into the root document; marker problems here are fatal."""
    readme = root_document(ctx, config)
    content = compose_all(report.records, config, ctx)
    with document_buffer(readme) as buffer:
        result = buffer.splice(ROOT_MARKERS, content)
        if isinstance(result, Err):
            raise result.error.to_error(ERR_DOCS)
        changed = buffer.changed
    if changed:
        report.written.append(readme)
    log_event(ctx, "info", "root", "updated" if changed else "unchanged", path=repo_relative(ctx.repo_root, readme))
    return readme


def update_unit_docs(ctx: RunContext, config: GeneratorConfig, report: GenerationReport) -> None:
    for record in report.records:
        readme = record.path / config.readme_file
        if not readme.is_file():
            failure = Failure(NOT_FOUND, repo_relative(ctx.repo_root, readme), "unit document not found")
            log_event(ctx, "info", "unit", "skipped", path=failure.path, reason=failure.message)
            report.failures.append(failure)
            continue
        splices = [
            (INPUT_MARKERS, render(record.inputs, "inputs")),
            (OUTPUT_MARKERS, render(record.outputs, "outputs")),
        ]
        try:
            outcome = splice_file(readme, splices)
        except (OSError, UnicodeDecodeError) as exc:
            failure = Failure(IO_ERROR, repo_relative(ctx.repo_root, readme), str(exc))
            log_event(ctx, "error", "unit", "io_failed", path=failure.path, error=failure.message)
            report.failures.append(failure)
            continue
        for failure in outcome.failures:
            log_event(ctx, "warning", "unit", failure.kind, path=repo_relative(ctx.repo_root, readme), error=failure.message)
            report.failures.append(failure)
        if outcome.written:
            report.written.append(readme)
        log_event(
            ctx,
            "info",
            "unit",
            "updated" if outcome.written else "unchanged",
            path=repo_relative(ctx.repo_root, readme),
            sections=len(outcome.applied),
        )


def run_generation(ctx: RunContext, config: GeneratorConfig, format_docs: bool = True) -> GenerationReport:
    root_document(ctx, config)
    report = GenerationReport()
    load_actions(ctx, config, report)
    generate_root_docs(ctx, config, report)
    update_unit_docs(ctx, config, report)
    if format_docs:
        report.formatter_failure = run_formatter(ctx, config, report.written)
    return report
