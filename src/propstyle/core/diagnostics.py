"""
Diagnostics for malformed props.

The parser never raises on bad input. Unknown breakpoint names and prop
values of an unsupported shape are reported to a sink injected into the
parser, and the offending entry simply contributes nothing to the output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class DiagnosticKind(StrEnum):
    """Categories of non-fatal input problems."""

    INVALID_OBJECT_KEY = "invalid_object_key"
    INVALID_VALUE_TYPE = "invalid_value_type"


_MESSAGES: dict[DiagnosticKind, str] = {
    DiagnosticKind.INVALID_OBJECT_KEY: "Invalid object key",
    DiagnosticKind.INVALID_VALUE_TYPE: "Invalid value type",
}


@dataclass(frozen=True)
class Diagnostic:
    """A single reported problem and the value that caused it."""

    kind: DiagnosticKind
    value: Any

    @property
    def message(self) -> str:
        return f"{_MESSAGES[self.kind]}: {self.value!r}"

    @classmethod
    def invalid_object_key(cls, key: Any) -> Diagnostic:
        return cls(DiagnosticKind.INVALID_OBJECT_KEY, key)

    @classmethod
    def invalid_value_type(cls, value: Any) -> Diagnostic:
        return cls(DiagnosticKind.INVALID_VALUE_TYPE, value)


class DiagnosticSink(Protocol):
    """Receiver for parser diagnostics."""

    def report(self, diagnostic: Diagnostic) -> None: ...


class LoggingSink:
    """Default sink: logs each diagnostic at ERROR level."""

    def __init__(self, log: logging.Logger | None = None):
        self.log = log if log is not None else logger

    def report(self, diagnostic: Diagnostic) -> None:
        self.log.error("%s: %r", _MESSAGES[diagnostic.kind], diagnostic.value)

    def __repr__(self) -> str:
        return f"LoggingSink({self.log.name!r})"


class RecordingSink:
    """Sink that keeps diagnostics in memory, for tests and tooling."""

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.kind == kind]

    def clear(self) -> None:
        self.diagnostics.clear()

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __repr__(self) -> str:
        return f"RecordingSink(diagnostics={len(self.diagnostics)})"


DEFAULT_SINK = LoggingSink()


__all__ = [
    "DiagnosticKind",
    "Diagnostic",
    "DiagnosticSink",
    "LoggingSink",
    "RecordingSink",
    "DEFAULT_SINK",
]
