"""``depwitness print-dependencies <descriptor>`` --- Configuration report.

Lists every resolvable configuration with the configurations it extends
and the digests of its direct module dependencies. Exclusions do not
apply: the report always covers the whole project.

Exit Codes:
    0 --- Report printed.
    2 --- The descriptor or an artifact is invalid or unreadable.
"""

from __future__ import annotations

import sys

import click

from depwitness.cli.options import (
    EXIT_OK,
    EXIT_USAGE,
    descriptor_argument,
    format_option,
    load_or_exit,
)
from depwitness.cli.output import print_error, print_json
from depwitness.core import describe_configurations, render_report
from depwitness.exceptions import DepWitnessError


@click.command("print-dependencies")
@descriptor_argument
@format_option
def dependencies_command(descriptor: str, output_format: str) -> None:
    """Show each configuration's hierarchy and direct dependency digests.

    Exit code 0 on success, 2 on invalid input.
    """
    loaded = load_or_exit(descriptor)
    try:
        infos = describe_configurations(loaded.project)
    except DepWitnessError as exc:
        print_error(str(exc))
        sys.exit(EXIT_USAGE)

    if output_format == "json":
        print_json({
            str(scoped): {
                "superconfigurations": info.super_configurations,
                "dependencies": info.dependencies,
            }
            for scoped, info in infos.items()
        })
    else:
        report = render_report(infos)
        if report:
            click.echo(report)
    sys.exit(EXIT_OK)
