"""Block reader: consumes one ``selector { ... }`` block and everything nested in it.

Nested blocks are flattened as they are read. Every block, at any depth,
becomes its own :class:`Rule` appended to the enclosing document, in the
order the opening lines appear. Nesting is tracked with an explicit stack
of open frames, so deep input never hits the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from nestcss.model.diagnostic import Diagnostic, Severity
from nestcss.model.nodes import Document, Rule
from nestcss.errors import NestingTooDeepError, UnclosedBlockError
from nestcss.parser.syntax import (
    block_selector,
    closes_block,
    opens_block,
    split_property,
)

logger = logging.getLogger("nestcss.parser")


@dataclass
class _Frame:
    """An open block waiting for its ``}``."""

    rule: Rule
    skipped: bool = False

    @property
    def path(self) -> tuple[str, ...]:
        return self.rule.selector_path

    @property
    def line(self) -> int | None:
        return self.rule.line


def read_block(
    lines: list[str],
    start: int,
    ancestors: tuple[str, ...],
    document: Document,
    *,
    max_depth: int = 64,
    on_unclosed: str = "error",
    source: str | None = None,
) -> int:
    """Read the block opened on ``lines[start]``.

    Appends one rule per block (the opened one plus every nested one) to
    ``document.nodes`` and returns the index just past the matching ``}``.

    If input ends first, ``on_unclosed="error"`` raises
    :class:`UnclosedBlockError`; ``"drop"`` removes every rule this call
    appended, records an ``unclosed_block`` diagnostic and returns
    ``len(lines)``.
    """
    nodes = document.nodes
    first = len(nodes)
    stack: list[_Frame] = []

    def open_frame(index: int, parent: _Frame | None) -> None:
        selector = block_selector(lines[index].strip())
        path = (parent.path if parent else ancestors) + (selector,)
        if len(path) > max_depth:
            raise NestingTooDeepError(max_depth, line=index + 1, source=source)
        rule = Rule(selector_path=path, properties={}, line=index + 1, source=source)
        # A block without a selector is read to its "}" but emits nothing,
        # and neither do the blocks nested inside it.
        skipped = not selector or (parent is not None and parent.skipped)
        if not selector:
            document.diagnostics.append(
                Diagnostic(
                    rule="empty_selector",
                    severity=Severity.WARNING,
                    message="Block without a selector skipped",
                    source=source,
                    line=index + 1,
                )
            )
        if not skipped:
            nodes.append(rule)
        stack.append(_Frame(rule, skipped=skipped))

    open_frame(start, None)
    i = start + 1
    while stack:
        if i >= len(lines):
            return _unclosed(stack[-1], nodes, first, document, on_unclosed, source, len(lines))

        line = lines[i].strip()
        i += 1
        if not line:
            continue

        frame = stack[-1]
        if closes_block(line):
            stack.pop()
        elif opens_block(line):
            open_frame(i - 1, frame)
        else:
            pair = split_property(line)
            if pair is None:
                logger.debug("Skipping malformed declaration on line %d: %r", i, line)
                document.diagnostics.append(
                    Diagnostic(
                        rule="malformed_declaration",
                        severity=Severity.WARNING,
                        message=f"Expected 'property: value;' but got {line!r}",
                        source=source,
                        line=i,
                    )
                )
                continue
            name, value = pair
            frame.rule.properties[name] = value
    return i


def _unclosed(
    frame: _Frame,
    nodes: list,
    first: int,
    document: Document,
    on_unclosed: str,
    source: str | None,
    end: int,
) -> int:
    if on_unclosed == "error":
        raise UnclosedBlockError(frame.path, line=frame.line, source=source)

    dropped = len(nodes) - first
    del nodes[first:]
    logger.warning(
        "Dropping unclosed block %r opened on line %s (%d rule(s))",
        " ".join(frame.path),
        frame.line,
        dropped,
    )
    document.diagnostics.append(
        Diagnostic(
            rule="unclosed_block",
            severity=Severity.ERROR,
            message=f"Unclosed block {' '.join(frame.path)!r} dropped",
            source=source,
            line=frame.line,
        )
    )
    return end
