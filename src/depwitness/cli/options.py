"""Options and helpers shared by the depwitness subcommands."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path

import click

from depwitness.cli.output import print_error
from depwitness.core import parse_exclusions
from depwitness.exceptions import DescriptorError
from depwitness.provider import ProjectDescriptor, load_project

# Exit codes
EXIT_OK = 0
EXIT_VERIFICATION_FAILED = 1
EXIT_USAGE = 2

descriptor_argument = click.argument(
    "descriptor", type=click.Path(exists=True, dir_okay=False)
)

format_option = click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)


def load_or_exit(descriptor: str) -> ProjectDescriptor:
    """Load a descriptor, exiting with code 2 when it is invalid."""
    try:
        return load_project(Path(descriptor))
    except DescriptorError as exc:
        print_error(str(exc))
        sys.exit(EXIT_USAGE)


def collect_exclusions(loaded: ProjectDescriptor, options: Iterable[str]) -> list[str]:
    """Merge the descriptor's exclusion property with ``--exclude`` values."""
    excluded = parse_exclusions(loaded.exclusions)
    for value in options:
        excluded.extend(parse_exclusions(value))
    return excluded
