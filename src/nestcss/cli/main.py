"""nestcss CLI entry point: Click group with subcommands."""

import logging

import click

from nestcss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="nestcss")
@click.option("-v", "--verbose", count=True, help="Log progress (-vv for debug output)")
def cli(verbose: int) -> None:
    """nestcss - compile nested selectors, variables and imports to flat CSS."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from nestcss.cli.compile import compile_command  # noqa: E402
from nestcss.cli.check import check  # noqa: E402

cli.add_command(compile_command)
cli.add_command(check)
