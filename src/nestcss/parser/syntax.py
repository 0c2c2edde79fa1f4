"""Lexical markers and single-line helpers shared by the parser and block reader."""

from __future__ import annotations

import re

IMPORT_MARKER = "@import"
VARIABLE_MARKER = "@"
BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"
TERMINATOR = ";"
SEPARATOR = ":"

# "@import" as a whole word; "@importance: 1;" is a variable.
_IMPORT_START_RE = re.compile(r"^@import(?![\w-])")

# @import 'path';  or  @import "path"
_IMPORT_RE = re.compile(
    r"""
    ^@import\s*
    (?P<quote>['"])          # opening quote
    (?P<path>.+?)            # the identifier, non-greedy
    (?P=quote)               # matching closing quote
    \s*;?\s*$
    """,
    re.VERBOSE,
)


def is_import(line: str) -> bool:
    return bool(_IMPORT_START_RE.match(line))


def import_path(line: str) -> str | None:
    """Return the quoted path of an ``@import`` line, or None if malformed."""
    match = _IMPORT_RE.match(line)
    if not match:
        return None
    return match.group("path").strip()


def strip_terminator(value: str) -> str:
    return value.strip().rstrip(TERMINATOR).rstrip()


def split_variable(line: str) -> tuple[str, str] | None:
    """Split ``@name: value;`` into ``(name, value)``.

    Only lines with exactly one separator colon qualify; anything else
    returns None and is left for rule detection.
    """
    if not line.startswith(VARIABLE_MARKER) or line.count(SEPARATOR) != 1:
        return None
    name, _, value = line.partition(SEPARATOR)
    name = name.strip()
    if name == VARIABLE_MARKER:
        return None
    return name, strip_terminator(value)


def split_property(line: str) -> tuple[str, str] | None:
    """Split ``property: value;`` once on the first colon."""
    name, sep, value = line.partition(SEPARATOR)
    name = name.strip()
    if not sep or not name:
        return None
    return name, strip_terminator(value)


def opens_block(line: str) -> bool:
    return line.endswith(BLOCK_OPEN)


def closes_block(line: str) -> bool:
    return line == BLOCK_CLOSE


def block_selector(line: str) -> str:
    return line[: -len(BLOCK_OPEN)].strip()
