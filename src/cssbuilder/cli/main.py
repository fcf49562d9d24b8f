"""cssbuilder CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuilder import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option("--verbose", is_flag=True, help="Log every fragment and combine step.")
def cli(verbose: bool) -> None:
    """cssbuilder - compose CSS selectors from validated parts."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.reference import combinators, kinds  # noqa: E402

cli.add_command(build)
cli.add_command(kinds)
cli.add_command(combinators)
