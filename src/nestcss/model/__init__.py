"""nestcss model layer -- public type re-exports."""

from nestcss.model.diagnostic import Diagnostic, Severity
from nestcss.model.nodes import Document, Node, Rule, VariableDeclaration

__all__ = [
    # nodes
    "VariableDeclaration",
    "Rule",
    "Node",
    "Document",
    # diagnostic
    "Severity",
    "Diagnostic",
]
