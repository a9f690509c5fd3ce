from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_INTERNAL

NOT_FOUND = "not_found"
PARSE_ERROR = "parse_error"
MISSING_START_MARKER = "missing_start_marker"
MISSING_END_MARKER = "missing_end_marker"
MARKER_ORDER = "marker_order"
EXTERNAL_TOOL_FAILURE = "external_tool_failure"
INVALID_CONFIG = "invalid_config"
IO_ERROR = "io_error"


@dataclass
class ScriptError(Exception):
    message: str
    code: int = ERR_INTERNAL
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Failure:
    """An expected, recoverable failure tied to one path."""

    kind: str
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message

    def to_error(self, code: int) -> ScriptError:
        return ScriptError(str(self), code, kind=self.kind)
