from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from .core.errors import MARKER_ORDER, MISSING_END_MARKER, MISSING_START_MARKER, NOT_FOUND, Failure, ScriptError
from .core.exit_codes import ERR_DOCS
from .core.result import Err, Ok, Result


@dataclass(frozen=True)
class MarkerPair:
    start: str
    end: str


@dataclass
class DocumentBuffer:
    path: Path
    original: str
    text: str

    @property
    def changed(self) -> bool:
        return self.text != self.original

    def splice(self, markers: MarkerPair, replacement: str) -> Result[str, Failure]:
        result = splice(self.text, markers.start, markers.end, replacement, path=str(self.path))
        if isinstance(result, Ok):
            self.text = result.value
        return result


@dataclass
class SpliceOutcome:
    path: Path
    applied: list[MarkerPair] = field(default_factory=list)
    failures: list[Failure] = field(default_factory=list)
    written: bool = False


def splice(
    document: str,
    start_marker: str,
    end_marker: str,
    replacement: str,
    path: str = "",
) -> Result[str, Failure]:
    """Replace the text strictly between `start_marker` and `end_marker`.

    The markers themselves and everything outside them are kept byte for byte;
    the replacement is framed by single newlines, so splicing the same text
    twice is a no-op.
    """
    start = document.find(start_marker)
    if start == -1:
        return Err(Failure(MISSING_START_MARKER, path, f"could not find start marker {start_marker!r}"))
    end = document.find(end_marker)
    if end == -1:
        return Err(Failure(MISSING_END_MARKER, path, f"could not find end marker {end_marker!r}"))
    if end <= start:
        return Err(Failure(MARKER_ORDER, path, f"end marker {end_marker!r} must come after start marker {start_marker!r}"))
    head = document[: start + len(start_marker)]
    tail = document[end:]
    return Ok(f"{head}\n{replacement}\n{tail}")


@contextmanager
def document_buffer(path: Path) -> Iterator[DocumentBuffer]:
    """Hold one document open for the whole read-modify-write cycle.

    The file is rewritten in full (truncate, write, flush) only when the scope
    exits cleanly and the text changed; an exception leaves it untouched.
    """
    try:
        handle = path.open("r+", encoding="utf-8", newline="")
    except FileNotFoundError as exc:
        raise ScriptError(f"{path}: document not found", ERR_DOCS, kind=NOT_FOUND) from exc
    with handle:
        original = handle.read()
        buffer = DocumentBuffer(path=path, original=original, text=original)
        yield buffer
        if buffer.changed:
            handle.seek(0)
            handle.truncate()
            handle.write(buffer.text)
            handle.flush()


def splice_file(path: Path, splices: list[tuple[MarkerPair, str]]) -> SpliceOutcome:
    """Apply each `(markers, replacement)` to one document, skipping pairs whose markers are unusable."""
    outcome = SpliceOutcome(path=path)
    with document_buffer(path) as buffer:
        for markers, replacement in splices:
            result = buffer.splice(markers, replacement)
            if isinstance(result, Err):
                outcome.failures.append(result.error)
            else:
                outcome.applied.append(markers)
        outcome.written = buffer.changed
    return outcome
