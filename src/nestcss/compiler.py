"""Compile pipeline: parse, then render."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from nestcss.config import CompilerConfig
from nestcss.loaders import FileSystemLoader, SourceLoader, SourceNotFound
from nestcss.model.diagnostic import Diagnostic
from nestcss.model.nodes import Document
from nestcss.parser import Parser
from nestcss.render import UnresolvedVariable, render_document

logger = logging.getLogger("nestcss.compiler")


@dataclass(frozen=True)
class CompileResult:
    """CSS text plus every diagnostic raised while producing it."""

    css: str
    document: Document
    diagnostics: list[Diagnostic] = field(default_factory=list)
    unresolved: tuple[UnresolvedVariable, ...] = ()

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    @property
    def ok(self) -> bool:
        return not self.errors


def compile_source(
    source: str,
    loader: SourceLoader | None = None,
    *,
    config: CompilerConfig | None = None,
    source_name: str | None = None,
) -> CompileResult:
    """Compile nestcss source text to CSS.

    Raises :class:`~nestcss.errors.ParseError` for structural errors the
    configuration does not allow to be skipped.
    """
    config = config or CompilerConfig()
    document = Parser(loader=loader, config=config).parse(source, source_name=source_name)
    rendered = render_document(document.nodes, config=config)
    diagnostics = list(document.diagnostics) + rendered.diagnostics
    logger.info(
        "Compiled %s: %d rule(s), %d variable(s), %d diagnostic(s)",
        source_name or "<string>",
        len(document.rules),
        len(document.variables),
        len(diagnostics),
    )
    return CompileResult(
        css=rendered.css,
        document=document,
        diagnostics=diagnostics,
        unresolved=rendered.unresolved,
    )


def compile_file(path: str | Path, *, config: CompilerConfig | None = None) -> CompileResult:
    """Compile the file at *path*, resolving imports relative to its directory.

    ``config.base_dir`` overrides the import root.
    """
    config = config or CompilerConfig()
    entry = Path(path)
    base_dir = Path(config.base_dir) if config.base_dir else entry.parent
    loader = FileSystemLoader(base_dir, extension=config.extension, encoding=config.encoding)
    try:
        source = entry.read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceNotFound(str(entry), reason=str(exc)) from exc
    return compile_source(source, loader, config=config, source_name=entry.name)
