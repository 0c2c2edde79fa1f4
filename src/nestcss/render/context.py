"""Variable bindings carried through a single render pass."""

from __future__ import annotations

from typing import NamedTuple

from nestcss.parser.syntax import VARIABLE_MARKER


class UnresolvedVariable(NamedTuple):
    """A variable reference that had no binding when its rule was rendered."""

    selector: str
    prop: str
    token: str
    source: str | None = None
    line: int | None = None


class RenderContext:
    """Ordered name-to-value store filled as declarations are visited.

    Later declarations of the same name overwrite earlier ones. A context
    belongs to exactly one render call and is never shared.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial) if initial else {}
        self._unresolved: list[UnresolvedVariable] = []

    # --- read / write ---------------------------------------------------------

    def set(self, name: str, value: str) -> None:
        self._data[name] = value

    def get(self, name: str, default: str | None = None) -> str | None:
        return self._data.get(name, default)

    def __contains__(self, name: str) -> bool:
        return name in self._data

    def snapshot(self) -> dict[str, str]:
        """Return a shallow copy of the current bindings."""
        return dict(self._data)

    # --- substitution ---------------------------------------------------------

    def substitute(
        self,
        value: str,
        selector: str = "",
        prop: str = "",
        source: str | None = None,
        line: int | None = None,
    ) -> str:
        """Replace whitespace-delimited ``@name`` tokens with their bound values.

        Unbound tokens are kept verbatim and recorded as unresolved.
        """
        tokens = value.split()
        for idx, token in enumerate(tokens):
            if not token.startswith(VARIABLE_MARKER):
                continue
            bound = self._data.get(token)
            if bound is None:
                self._unresolved.append(UnresolvedVariable(selector, prop, token, source, line))
            else:
                tokens[idx] = bound
        return " ".join(tokens)

    @property
    def unresolved(self) -> list[UnresolvedVariable]:
        return list(self._unresolved)

    def __repr__(self) -> str:
        return f"RenderContext(names={list(self._data)}, unresolved={len(self._unresolved)})"
