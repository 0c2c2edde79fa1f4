from nestcss.errors import (
    CompileError,
    NestingTooDeepError,
    ParseError,
    UnclosedBlockError,
)
from nestcss.parser.parser import Parser, parse

__all__ = [
    "parse",
    "Parser",
    "CompileError",
    "ParseError",
    "UnclosedBlockError",
    "NestingTooDeepError",
]
