"""Data model shared by the parser and the passes: parsed sentences and diagnostics."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TextIO


class Guidance(enum.IntEnum):
    """Kind of guidance (directive) sentence."""

    EXTERN = 0
    ENTRY = 1
    NUM = 2
    STRING = 3
    MAT = 4


class SymbolKind(enum.IntEnum):
    """Where a symbol lives."""

    NONE = 0
    DATA = 1
    CODE = 2


@dataclass
class Sentence:
    """One parsed source line."""

    is_action: bool = False
    is_store: bool | None = None
    guidance: Guidance | None = None
    has_symbol: bool = False
    symbol: str = ""
    opcode: str = ""
    operand_count: int | None = None
    source_type: str = ""
    dest_type: str = ""
    operand_1: str = ""
    operand_2: str = ""
    immediate_a: int = 0
    immediate_b: int = 0
    matrix_row_a: str = ""
    matrix_col_a: str = ""
    matrix_row_b: str = ""
    matrix_col_b: str = ""
    string: str = ""
    data: list[int] = field(default_factory=list)
    matrix: list[int] = field(default_factory=list)
    matrix_rows: int = 0
    matrix_cols: int = 0


class Severity(enum.Enum):
    ERROR = "Error"
    WARNING = "Warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single message tied to a source line."""

    severity: Severity
    line_number: int
    message: str

    def __str__(self) -> str:
        return f"{self.severity.value} in line {self.line_number} - {self.message}"


@dataclass
class Diagnostics:
    """Collects messages found while assembling and whether any was fatal."""

    stream: TextIO | None = None
    entries: list[Diagnostic] = field(default_factory=list)
    failed: bool = False

    def _record(self, severity: Severity, line_number: int, message: str) -> Diagnostic:
        entry = Diagnostic(severity, line_number, message)
        self.entries.append(entry)
        if self.stream is not None:
            print(entry, file=self.stream)
        return entry

    def error(self, line_number: int, message: str) -> Diagnostic:
        """Record an error that stops the assembly."""
        self.failed = True
        return self._record(Severity.ERROR, line_number, message)

    def note(self, line_number: int, message: str) -> Diagnostic:
        """Record an error message that does not stop the assembly."""
        return self._record(Severity.ERROR, line_number, message)

    def warning(self, line_number: int, message: str) -> Diagnostic:
        """Record a warning."""
        return self._record(Severity.WARNING, line_number, message)