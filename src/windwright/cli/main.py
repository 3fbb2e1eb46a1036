"""windwright CLI entry point: Click group with subcommands."""

import logging

import click

from windwright import __version__


@click.group()
@click.version_option(version=__version__, prog_name="windwright")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """windwright - compile utility-class candidates into CSS."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from windwright.cli.compile import compile_command  # noqa: E402
from windwright.cli.listing import classes, variants  # noqa: E402
from windwright.cli.order import order  # noqa: E402

cli.add_command(compile_command)
cli.add_command(order)
cli.add_command(classes)
cli.add_command(variants)
