# ABOUTME: CLI package for shelfscan, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.logging import RichHandler

from shelfscan.cli.commands import clusters_cmd, match_cmd, scan_cmd


@click.group()
@click.version_option(package_name="shelfscan")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """shelfscan - identify the books on a photographed shelf."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


cli.add_command(clusters_cmd.clusters)
cli.add_command(match_cmd.match)
cli.add_command(scan_cmd.scan)
