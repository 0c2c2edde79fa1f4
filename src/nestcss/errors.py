"""Error hierarchy for nestcss."""

from __future__ import annotations


class CompileError(Exception):
    """Base error for everything nestcss raises."""


class ParseError(CompileError):
    """Raised when source text has a structural problem that cannot be skipped."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        source: str | None = None,
    ):
        self.line = line
        self.column = column
        self.source = source
        super().__init__(message)


class UnclosedBlockError(ParseError):
    """Raised when input ends before a block's closing ``}``."""

    def __init__(
        self,
        selector_path: tuple[str, ...],
        line: int | None = None,
        source: str | None = None,
    ):
        self.selector_path = selector_path
        where = f" (opened on line {line})" if line is not None else ""
        super().__init__(
            f"Unclosed block {' '.join(selector_path)!r}{where}",
            line=line,
            source=source,
        )


class NestingTooDeepError(ParseError):
    """Raised when blocks nest deeper than the configured limit."""

    def __init__(self, limit: int, line: int | None = None, source: str | None = None):
        self.limit = limit
        super().__init__(
            f"Blocks nested deeper than {limit} levels", line=line, source=source
        )
