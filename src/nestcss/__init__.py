"""nestcss: compile nested selectors, variables and imports into flat CSS."""

__version__ = "0.1.0"

from nestcss.compiler import CompileResult, compile_file, compile_source
from nestcss.config import CompilerConfig
from nestcss.errors import CompileError, NestingTooDeepError, ParseError, UnclosedBlockError
from nestcss.loaders import DictLoader, FileSystemLoader, SourceLoader, SourceNotFound
from nestcss.model import Diagnostic, Document, Node, Rule, Severity, VariableDeclaration
from nestcss.parser import Parser, parse
from nestcss.render import RenderResult, render, render_document

__all__ = [
    "__version__",
    # pipeline
    "parse",
    "Parser",
    "render",
    "render_document",
    "RenderResult",
    "compile_source",
    "compile_file",
    "CompileResult",
    "CompilerConfig",
    # loaders
    "SourceLoader",
    "FileSystemLoader",
    "DictLoader",
    # model
    "VariableDeclaration",
    "Rule",
    "Node",
    "Document",
    "Diagnostic",
    "Severity",
    # errors
    "CompileError",
    "ParseError",
    "UnclosedBlockError",
    "NestingTooDeepError",
    "SourceNotFound",
]
