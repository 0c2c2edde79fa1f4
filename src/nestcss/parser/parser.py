"""Line-oriented parser for the nestcss dialect.

Syntax example:
    @import 'colors';
    @accent: #c0ffee;
    nav {
      color: @accent;
      a {
        padding: 0 4px;
      }
    }

One construct per physical line. Imports are resolved eagerly and spliced
in place, so the resulting document is a flat list of variables and rules
in the order a reader would encounter them.
"""

from __future__ import annotations

import logging

from nestcss.config import CompilerConfig
from nestcss.loaders import SourceLoader, SourceNotFound
from nestcss.model.diagnostic import Diagnostic, Severity
from nestcss.model.nodes import Document, VariableDeclaration
from nestcss.parser.block_reader import read_block
from nestcss.parser.syntax import import_path, is_import, opens_block, split_variable

__all__ = ["Parser", "parse"]

logger = logging.getLogger("nestcss.parser")

BYTE_ORDER_MARK = "\ufeff"


class Parser:
    """Turns source text into a :class:`Document`.

    A parser holds only its collaborators (loader and config). All state of
    an in-progress parse lives in the call, so one instance can be reused.
    """

    def __init__(
        self,
        loader: SourceLoader | None = None,
        config: CompilerConfig | None = None,
    ) -> None:
        self.loader = loader
        self.config = config or CompilerConfig()

    def parse(self, source: str, source_name: str | None = None) -> Document:
        chain = (self._import_key(source_name),) if source_name else ()
        return self._parse_unit(source, source_name, chain)

    # --- internals ------------------------------------------------------------

    def _import_key(self, identifier: str) -> str:
        """Normalize an identifier so ``'./base'`` and ``'base.less'`` count as one unit."""
        key = identifier.strip().replace("\\", "/")
        while key.startswith("./"):
            key = key[2:]
        ext = self.config.extension
        if ext and key.endswith(ext):
            key = key[: -len(ext)]
        return key

    def _parse_unit(
        self, source: str, name: str | None, chain: tuple[str, ...]
    ) -> Document:
        document = Document()
        lines = source.removeprefix(BYTE_ORDER_MARK).splitlines()
        i = 0
        while i < len(lines):
            line = lines[i].strip()
            if not line:
                i += 1
                continue

            if is_import(line):
                self._import(line, i + 1, name, chain, document)
                i += 1
                continue

            pair = split_variable(line)
            if pair is not None:
                document.nodes.append(VariableDeclaration(name=pair[0], value=pair[1]))
                i += 1
                continue

            if opens_block(line):
                i = read_block(
                    lines,
                    i,
                    (),
                    document,
                    max_depth=self.config.max_depth,
                    on_unclosed=self.config.on_unclosed,
                    source=name,
                )
                continue

            logger.debug("Ignoring line %d of %s: %r", i + 1, name or "<string>", line)
            i += 1
        return document

    def _import(
        self,
        line: str,
        lineno: int,
        name: str | None,
        chain: tuple[str, ...],
        document: Document,
    ) -> None:
        """Resolve an ``@import`` line and splice the imported nodes into *document*."""

        def report(rule: str, severity: Severity, message: str) -> None:
            logger.warning("%s (%s:%d)", message, name or "<string>", lineno)
            document.diagnostics.append(
                Diagnostic(rule=rule, severity=severity, message=message, source=name, line=lineno)
            )

        target = import_path(line)
        if target is None:
            report("import_malformed", Severity.WARNING, f"Cannot read import path from {line!r}")
            return
        key = self._import_key(target)
        if key in chain:
            cycle = " -> ".join(chain + (key,))
            report("import_cycle", Severity.ERROR, f"Circular import skipped: {cycle}")
            return
        if self.loader is None:
            report("import_not_found", Severity.ERROR, f"Cannot import {target!r}: no loader configured")
            return

        try:
            text = self.loader.load(target)
        except SourceNotFound as exc:
            report("import_not_found", Severity.ERROR, str(exc))
            return

        logger.info("Importing %s into %s", target, name or "<string>")
        imported = self._parse_unit(text, target, chain + (key,))
        document.nodes.extend(imported.nodes)
        document.diagnostics.extend(imported.diagnostics)


def parse(
    source: str,
    loader: SourceLoader | None = None,
    *,
    config: CompilerConfig | None = None,
    source_name: str | None = None,
) -> Document:
    """Parse nestcss source text into a flat :class:`Document`.

    Import failures and malformed declarations are recorded in
    ``Document.diagnostics``. An unclosed block raises
    :class:`~nestcss.errors.UnclosedBlockError` unless
    ``config.on_unclosed`` is ``"drop"``.
    """
    return Parser(loader=loader, config=config).parse(source, source_name=source_name)
