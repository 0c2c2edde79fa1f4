"""CLI command: nestcss check -- parse a stylesheet and report diagnostics."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from nestcss.config import CompilerConfig
from nestcss.errors import ParseError
from nestcss.loaders import FileSystemLoader
from nestcss.model.diagnostic import Severity
from nestcss.parser import parse


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("--base-dir", type=click.Path(file_okay=False), default=None, help="Directory imports are resolved against")
def check(source: str, base_dir: str | None) -> None:
    """Parse SOURCE without rendering it.

    Prints diagnostics and exits with code 0 if no errors are found, or
    code 1 if there are errors.
    """
    path = Path(source)
    config = CompilerConfig(base_dir=base_dir)
    loader = FileSystemLoader(base_dir or path.parent, extension=config.extension)

    try:
        document = parse(
            path.read_text(encoding=config.encoding),
            loader,
            config=config,
            source_name=path.name,
        )
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    diagnostics = document.diagnostics
    if not diagnostics:
        click.echo(
            f"OK: {path.name} ({len(document.rules)} rule(s), "
            f"{len(document.variables)} variable(s))"
        )
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(f"Summary: {len(errors)} error(s), {len(warnings)} warning(s)")

    sys.exit(1 if errors else 0)
