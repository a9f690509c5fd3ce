from __future__ import annotations

import argparse
import json
import sys

from . import __version__
from .config import load_config
from .core.context import RunContext
from .core.errors import ScriptError
from .core.exit_codes import ERR_INTERNAL, OK
from .core.logging import log_event
from .core.paths import repo_relative
from .generate import GenerationReport, run_generation


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="action-docs",
        description="Regenerate action documentation between README markers.",
    )
    p.add_argument("--version", action="version", version=f"action-docs {__version__}")
    p.add_argument("--repo-root", help="repository root to scan (default: current directory)")
    p.add_argument("--config", help="YAML config file (default: .action-docs.yml when present)")
    p.add_argument("--format", choices=["text", "json"], default="text", help="log and summary output format")
    p.add_argument("--no-format", action="store_true", help="skip the external formatter pass")
    p.add_argument("--quiet", action="store_true", help="only emit warnings and errors")
    return p


def _emit_summary(ctx: RunContext, report: GenerationReport) -> None:
    if ctx.output_format == "json":
        print(json.dumps(report.as_payload(ctx), sort_keys=True))
        return
    if ctx.quiet:
        return
    print(f"Generated documentation for {len(report.records)} actions")
    for path in report.written:
        print(f"updated {repo_relative(ctx.repo_root, path)}")
    if report.failures:
        print(f"{len(report.failures)} unit(s) skipped or partially updated; see log for details")
    if report.formatter_failure is not None:
        print(f"formatter failed: {report.formatter_failure.message}")


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    ctx = RunContext.from_args(ns.repo_root, ns.format, ns.quiet)
    try:
        config = load_config(ctx.repo_root, ns.config)
        log_event(ctx, "info", "cli", "start", repo_root=ctx.repo_root, formatter=not ns.no_format)
        report = run_generation(ctx, config, format_docs=not ns.no_format)
        _emit_summary(ctx, report)
        return OK
    except ScriptError as exc:
        log_event(ctx, "error", "cli", exc.kind, error=exc.message, code=exc.code)
        if ctx.output_format == "json":
            print(
                json.dumps(
                    {
                        "schema_version": 1,
                        "tool": "action-docs",
                        "status": "fail",
                        "error": {"message": str(exc), "kind": exc.kind, "code": exc.code},
                    },
                    sort_keys=True,
                ),
                file=sys.stderr,
            )
        else:
            print(str(exc), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(f"internal error: {exc}", file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
