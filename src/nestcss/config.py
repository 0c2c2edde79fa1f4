from __future__ import annotations

from dataclasses import dataclass

UNCLOSED_POLICIES = ("error", "drop")


@dataclass(frozen=True)
class CompilerConfig:
    base_dir: str | None = None  # defaults to the entry file's directory
    extension: str = ".less"
    encoding: str = "utf-8"
    on_unclosed: str = "error"  # "error" raises, "drop" discards the partial block
    max_depth: int = 64
    indent: str = "  "
    selector_separator: str = " "
    omit_empty_rules: bool = False

    def __post_init__(self) -> None:
        if self.on_unclosed not in UNCLOSED_POLICIES:
            raise ValueError(
                f"on_unclosed must be one of {UNCLOSED_POLICIES}, got {self.on_unclosed!r}"
            )
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
