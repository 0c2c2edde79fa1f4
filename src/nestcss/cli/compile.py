"""CLI command: nestcss compile -- render a stylesheet to flat CSS."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from nestcss.compiler import compile_file
from nestcss.config import UNCLOSED_POLICIES, CompilerConfig
from nestcss.errors import ParseError
from nestcss.loaders import SourceNotFound


@click.command("compile")
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None, help="Write CSS here instead of stdout")
@click.option("--base-dir", type=click.Path(file_okay=False), default=None, help="Directory imports are resolved against")
@click.option(
    "--on-unclosed",
    type=click.Choice(UNCLOSED_POLICIES),
    default="error",
    show_default=True,
    help="Abort on an unclosed block, or drop it and keep going",
)
@click.option("--omit-empty", is_flag=True, help="Skip rules that have no properties")
def compile_command(
    source: str,
    output: str | None,
    base_dir: str | None,
    on_unclosed: str,
    omit_empty: bool,
) -> None:
    """Compile SOURCE to CSS.

    Diagnostics go to stderr. Exits with code 1 if any error was reported,
    even when partial CSS was written.
    """
    config = CompilerConfig(
        base_dir=base_dir,
        on_unclosed=on_unclosed,
        omit_empty_rules=omit_empty,
    )
    try:
        result = compile_file(source, config=config)
    except (ParseError, SourceNotFound) as exc:
        click.echo(f"Compile error: {exc}", err=True)
        sys.exit(1)

    for diag in result.diagnostics:
        click.echo(str(diag), err=True)

    if output:
        Path(output).write_text(result.css, encoding=config.encoding)
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(result.css, nl=False)

    sys.exit(0 if result.ok else 1)
