"""depwitness CLI --- pin and verify dependency artifact digests.

Entry point for the ``depwitness`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    verify               --- Check pinned assertions against resolved artifacts.
    calculate-checksums  --- Print paste-ready assertions for the current state.
    print-dependencies   --- Show configurations, hierarchy and dependency digests.

Usage::

    depwitness verify build-model.yaml
    depwitness verify build-model.yaml --exclude lint,app:testCompile
    depwitness calculate-checksums build-model.yaml
    depwitness print-dependencies build-model.yaml --format json
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from depwitness import __version__
from depwitness.cli.checksums_cmd import checksums_command
from depwitness.cli.dependencies_cmd import dependencies_command
from depwitness.cli.verify import verify_command


def configure_logging(verbosity: int) -> None:
    """Route depwitness logs to stderr through Rich.

    No flag shows warnings only, ``-v`` adds progress messages and
    ``-vv`` adds debug output.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase log output (-v for progress, -vv for debug).",
)
def cli(verbose: int) -> None:
    """depwitness: Verify that resolved dependencies match pinned digests.

    Reads a project descriptor describing the build's configurations and
    resolved artifacts, hashes every direct module dependency, and checks
    the result against the project's pinned assertions.
    """
    configure_logging(verbose)


# Register all subcommands
cli.add_command(verify_command)
cli.add_command(checksums_command)
cli.add_command(dependencies_command)
