"""CSS generation: renders a flat node list into CSS text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from nestcss.config import CompilerConfig
from nestcss.model.diagnostic import Diagnostic, Severity
from nestcss.model.nodes import Node, Rule, VariableDeclaration
from nestcss.render.context import RenderContext, UnresolvedVariable

__all__ = ["RenderResult", "render", "render_document"]


@dataclass(frozen=True)
class RenderResult:
    """Output of one render pass.

    Attributes:
        css: The generated CSS text.
        variables: Bindings in effect after the last node.
        unresolved: Every variable reference that had no binding when its
            rule was rendered, with the rule's source and line.
    """

    css: str
    variables: dict[str, str] = field(default_factory=dict)
    unresolved: tuple[UnresolvedVariable, ...] = ()

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return [
            Diagnostic(
                rule="unresolved_variable",
                severity=Severity.WARNING,
                message=f"Unresolved variable {ref.token} in {ref.selector} {{ {ref.prop} }}",
                source=ref.source,
                line=ref.line,
            )
            for ref in self.unresolved
        ]


def _render_rule(rule: Rule, context: RenderContext, config: CompilerConfig) -> str:
    selector = config.selector_separator.join(rule.selector_path)
    parts = [f"{selector} {{\n"]
    for prop, value in rule.properties.items():
        resolved = context.substitute(
            value, selector=selector, prop=prop, source=rule.source, line=rule.line
        )
        parts.append(f"{config.indent}{prop}: {resolved};\n")
    parts.append("}\n")
    return "".join(parts)


def render_document(
    nodes: Iterable[Node], *, config: CompilerConfig | None = None
) -> RenderResult:
    """Render *nodes* in a single left-to-right pass.

    A rule only sees variables declared before it in document order.
    """
    config = config or CompilerConfig()
    context = RenderContext()
    chunks: list[str] = []
    for node in nodes:
        if isinstance(node, VariableDeclaration):
            context.set(node.name, node.value)
        elif isinstance(node, Rule):
            if config.omit_empty_rules and not node.properties:
                continue
            chunks.append(_render_rule(node, context, config))
        else:
            raise TypeError(f"Unknown document node: {node!r}")
    return RenderResult(
        css="".join(chunks),
        variables=context.snapshot(),
        unresolved=tuple(context.unresolved),
    )


def render(nodes: Iterable[Node], *, config: CompilerConfig | None = None) -> str:
    """Render *nodes* to CSS text."""
    return render_document(nodes, config=config).css
