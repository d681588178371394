"""css-structs CLI entry point: Click group with subcommands."""

import logging

import click

from css_structs import __version__


@click.group()
@click.version_option(version=__version__, prog_name="css-structs")
@click.option("-v", "--verbose", is_flag=True, help="Log parser progress to stderr.")
def cli(verbose: bool) -> None:
    """css-structs - parse, check and reformat CSS stylesheets."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from css_structs.cli.check import check  # noqa: E402
from css_structs.cli.format import format_  # noqa: E402
from css_structs.cli.inspect import inspect  # noqa: E402

cli.add_command(format_)
cli.add_command(check)
cli.add_command(inspect)
