"""Source loaders: resolve an import identifier to stylesheet text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from nestcss.errors import CompileError

logger = logging.getLogger("nestcss.loaders")


class SourceNotFound(CompileError, LookupError):
    """Raised by a loader when an identifier cannot be resolved."""

    def __init__(self, identifier: str, reason: str | None = None) -> None:
        self.identifier = identifier
        self.reason = reason
        message = f"Source not found: {identifier}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class SourceLoader(Protocol):
    """Protocol for where imported stylesheets come from.

    The default reads from the local filesystem. Implementations can serve
    sources from memory, a package, or a remote store without changing the
    parser.
    """

    def load(self, identifier: str) -> str: ...


class FileSystemLoader:
    """Reads sources from disk, relative to a base directory.

    An identifier without a suffix that does not exist as written is retried
    with *extension* appended, so ``@import 'colors';`` finds ``colors.less``.
    """

    def __init__(
        self,
        base_dir: str | Path = ".",
        extension: str = ".less",
        encoding: str = "utf-8",
    ) -> None:
        self._base_dir = Path(base_dir)
        self._extension = extension
        self._encoding = encoding

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def load(self, identifier: str) -> str:
        for candidate in self._candidates(identifier):
            try:
                if not candidate.is_file():
                    continue
                text = candidate.read_text(encoding=self._encoding)
            except (OSError, UnicodeDecodeError) as exc:
                raise SourceNotFound(identifier, reason=str(exc)) from exc
            logger.debug("Loaded %s from %s", identifier, candidate)
            return text
        raise SourceNotFound(identifier, reason=f"searched {self._base_dir}")

    def _candidates(self, identifier: str) -> list[Path]:
        p = Path(identifier)
        if not p.is_absolute():
            p = self._base_dir / p
        candidates = [p]
        if self._extension and not p.suffix:
            candidates.append(p.with_name(p.name + self._extension))
        return candidates


class DictLoader:
    """In-memory loader backed by a mapping of identifier to source text.

    Every lookup is recorded in :attr:`calls`, which makes the import order
    observable in tests.
    """

    def __init__(self, sources: dict[str, str] | None = None) -> None:
        self._sources: dict[str, str] = dict(sources) if sources else {}
        self.calls: list[str] = []

    def add(self, identifier: str, text: str) -> None:
        self._sources[identifier] = text

    def load(self, identifier: str) -> str:
        self.calls.append(identifier)
        if identifier not in self._sources:
            raise SourceNotFound(identifier)
        return self._sources[identifier]
