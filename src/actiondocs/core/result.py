"""Result helpers for per-unit operations.

Process-level failures are raised as `ScriptError`; failures that only affect
one unit or one document travel as `Err` values so a batch can keep going.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Union[Ok[T], Err[E]]
