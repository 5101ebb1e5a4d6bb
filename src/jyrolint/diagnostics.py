"""Diagnostic values and the collector each analysis pass fills."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterator, List

SOURCE = "jyro"


class Severity(IntEnum):
    # Numbering follows the editor protocol so callers can pass it through.
    ERROR = 1
    WARNING = 2
    INFORMATION = 3

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Position:
    line: int
    character: int

    def to_dict(self) -> Dict[str, int]:
        return {"line": self.line, "character": self.character}


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position

    @classmethod
    def on_line(cls, line: int, start: int, end: int) -> "Range":
        return cls(Position(line, start), Position(line, end))

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    range: Range
    message: str
    source: str = SOURCE

    @property
    def line(self) -> int:
        return self.range.start.line

    def to_dict(self) -> Dict[str, Any]:
        return {
            "severity": int(self.severity),
            "range": self.range.to_dict(),
            "message": self.message,
            "source": self.source,
        }

    def __str__(self) -> str:
        start = self.range.start
        return f"{start.line + 1}:{start.character + 1}: {self.severity.label}: {self.message}"


class DiagnosticCollector:
    """Ordered accumulator of findings for one pass.

    Duplicates are kept; the order is the order of ``add`` calls.
    """

    def __init__(self):
        self._items: List[Diagnostic] = []

    def add(self, line: int, start: int, end: int, message: str, severity: Severity) -> Diagnostic:
        diagnostic = Diagnostic(severity, Range.on_line(line, start, end), message)
        self._items.append(diagnostic)
        return diagnostic

    def error(self, line: int, start: int, end: int, message: str) -> Diagnostic:
        return self.add(line, start, end, message, Severity.ERROR)

    def warning(self, line: int, start: int, end: int, message: str) -> Diagnostic:
        return self.add(line, start, end, message, Severity.WARNING)

    def information(self, line: int, start: int, end: int, message: str) -> Diagnostic:
        return self.add(line, start, end, message, Severity.INFORMATION)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> List[Diagnostic]:
        return list(self._items)
