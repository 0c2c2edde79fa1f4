"""Document model: the flat node list produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from nestcss.model.diagnostic import Diagnostic


@dataclass(frozen=True)
class VariableDeclaration:
    """A binding introduced by a ``@name: value;`` line.

    ``name`` keeps its ``@`` marker so values can be looked up by the exact
    token that references them.
    """

    name: str
    value: str


@dataclass(frozen=True)
class Rule:
    """A flattened rule: the full selector path and its own properties.

    Properties of enclosing blocks are not inherited; each nesting level is
    a separate rule.
    """

    selector_path: tuple[str, ...]
    properties: dict[str, str] = field(default_factory=dict)
    line: int | None = None
    source: str | None = None

    def __post_init__(self) -> None:
        if not self.selector_path:
            raise ValueError("Rule selector_path must not be empty")
        # Accept any sequence but always store a tuple.
        object.__setattr__(self, "selector_path", tuple(self.selector_path))

    @property
    def selector(self) -> str:
        return " ".join(self.selector_path)

    @property
    def depth(self) -> int:
        return len(self.selector_path)


Node = Union[VariableDeclaration, Rule]


@dataclass
class Document:
    """The result of parsing one source unit (imports already spliced in)."""

    nodes: list[Node] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def rules(self) -> list[Rule]:
        return [n for n in self.nodes if isinstance(n, Rule)]

    @property
    def variables(self) -> list[VariableDeclaration]:
        return [n for n in self.nodes if isinstance(n, VariableDeclaration)]

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]
