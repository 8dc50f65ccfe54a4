"""Command-line interface for procon_gardener."""

import functools
import logging
import sys

import click

from . import __version__
from .archive import archive_submissions
from .client import AtCoderClient
from .config import GlobalConfig, config_path, init_config
from .errors import GardenerError
from .utils import console, open_in_editor, setup_logging


logger = logging.getLogger(__name__)


def reports_errors(command):
    """Log a GardenerError and exit with status 1 instead of a traceback."""

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except GardenerError as e:
            logger.error("%s: %s", type(e).__name__, e)
            sys.exit(1)

    return wrapper


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug output")
def cli(verbose: bool):
    """procon-gardener - archive your AC submissions."""
    setup_logging(verbose)


@cli.command()
@reports_errors
def archive():
    """Archive your AC submissions."""
    path = config_path()
    service = GlobalConfig.load(path).atcoder
    service.validate(path)

    client = AtCoderClient()
    try:
        report = archive_submissions(service, client)
    finally:
        client.close()

    console.print(
        f"[green]Archived {report.archived} submissions[/green] "
        f"({report.accepted} accepted of {report.fetched} fetched)"
    )


@cli.command()
@reports_errors
def init():
    """Initialize your config."""
    init_config(force=True)


@cli.command()
@reports_errors
def edit():
    """Edit your config file."""
    path = config_path()
    # Config file not found, force to run an init cmd
    if not path.exists():
        init_config(force=True)
        return
    open_in_editor(path)


cli.add_command(archive, name="a")
cli.add_command(init, name="i")
cli.add_command(edit, name="e")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
