"""Diagnostic model: structured messages reported while compiling a stylesheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding produced by the parser or renderer.

    Attributes:
        rule: Identifier for the condition that produced this diagnostic
            (e.g. ``import_not_found``, ``unresolved_variable``).
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        source: Name of the source unit involved, if known.
        line: 1-based line number within *source*, if known.
    """

    rule: str
    severity: Severity
    message: str
    source: str | None = None
    line: int | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.source and self.line is not None:
            location = f" [{self.source}:{self.line}]"
        elif self.source:
            location = f" [{self.source}]"
        elif self.line is not None:
            location = f" [line {self.line}]"
        return f"{self.severity.value}{location}: {self.message}"
