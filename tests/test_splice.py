from __future__ import annotations

from pathlib import Path

import pytest

from actiondocs.core.errors import MARKER_ORDER, MISSING_END_MARKER, MISSING_START_MARKER, NOT_FOUND, ScriptError
from actiondocs.core.result import Err, Ok
from actiondocs.splice import MarkerPair, document_buffer, splice, splice_file

START = "<!-- start inputs -->"
END = "<!-- end inputs -->"
PAIR = MarkerPair(START, END)


def test_splice_replaces_only_between_markers() -> None:
    doc = f"head\n{START}\nold\nlines\n{END}\ntail\n"
    result = splice(doc, START, END, "new")
    assert result == Ok(f"head\n{START}\nnew\n{END}\ntail\n")


def test_splice_is_idempotent() -> None:
    doc = f"# T\n\n{START}{END}\n"
    once = splice(doc, START, END, "| a |")
    assert isinstance(once, Ok)
    twice = splice(once.value, START, END, "| a |")
    assert twice == once


def test_splice_missing_start_marker() -> None:
    result = splice(f"text {END}", START, END, "x", path="README.md")
    assert isinstance(result, Err)
    assert result.error.kind == MISSING_START_MARKER
    assert result.error.path == "README.md"


def test_splice_missing_end_marker() -> None:
    result = splice(f"{START} text", START, END, "x")
    assert isinstance(result, Err)
    assert result.error.kind == MISSING_END_MARKER


def test_splice_rejects_end_before_start() -> None:
    result = splice(f"{END}\n{START}\n", START, END, "x")
    assert isinstance(result, Err)
    assert result.error.kind == MARKER_ORDER


def test_document_buffer_rewrites_changed_text_and_keeps_crlf(tmp_path: Path) -> None:
    path = tmp_path / "README.md"
    path.write_bytes(f"a\r\n{START}\r\nold\r\n{END}\r\nb\r\n".encode())
    with document_buffer(path) as buffer:
        assert isinstance(buffer.splice(PAIR, "new"), Ok)
    assert path.read_bytes() == f"a\r\n{START}\nnew\n{END}\r\nb\r\n".encode()


def test_document_buffer_writes_nothing_when_scope_raises(tmp_path: Path) -> None:
    path = tmp_path / "README.md"
    path.write_text(f"{START}\nold\n{END}\n", encoding="utf-8")
    with pytest.raises(RuntimeError):
        with document_buffer(path) as buffer:
            buffer.splice(PAIR, "new")
            raise RuntimeError("boom")
    assert path.read_text(encoding="utf-8") == f"{START}\nold\n{END}\n"


def test_document_buffer_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ScriptError) as exc:
        with document_buffer(tmp_path / "missing.md"):
            pass
    assert exc.value.kind == NOT_FOUND


def test_document_buffer_shorter_text_truncates(tmp_path: Path) -> None:
    path = tmp_path / "README.md"
    path.write_text(f"{START}\n{'x' * 200}\n{END}\n", encoding="utf-8")
    with document_buffer(path) as buffer:
        buffer.splice(PAIR, "y")
    assert path.read_text(encoding="utf-8") == f"{START}\ny\n{END}\n"


def test_splice_file_applies_good_pairs_and_reports_bad_ones(tmp_path: Path) -> None:
    path = tmp_path / "README.md"
    path.write_text(f"# Unit\n\n{START}\n{END}\n", encoding="utf-8")
    outputs = MarkerPair("<!-- start outputs -->", "<!-- end outputs -->")

    outcome = splice_file(path, [(PAIR, "table"), (outputs, "other")])

    assert outcome.applied == [PAIR]
    assert [f.kind for f in outcome.failures] == [MISSING_START_MARKER]
    assert outcome.written is True
    assert path.read_text(encoding="utf-8") == f"# Unit\n\n{START}\ntable\n{END}\n"


def test_splice_file_leaves_untouched_document_alone(tmp_path: Path) -> None:
    path = tmp_path / "README.md"
    path.write_text("# Unit without markers\n", encoding="utf-8")
    before = path.stat().st_mtime_ns

    outcome = splice_file(path, [(PAIR, "table")])

    assert outcome.written is False
    assert outcome.applied == []
    assert path.stat().st_mtime_ns == before
