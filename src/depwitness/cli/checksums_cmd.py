"""``depwitness calculate-checksums <descriptor>`` --- Emit pinned assertions.

Hashes the direct module dependencies of every configuration that is not
excluded and prints them as a ``dependencyVerification`` block, ready to
be pasted back into the project after an intentional dependency change.

Exit Codes:
    0 --- Assertions emitted.
    2 --- The descriptor or an artifact is invalid or unreadable.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from depwitness.cli.options import (
    EXIT_OK,
    EXIT_USAGE,
    collect_exclusions,
    descriptor_argument,
    format_option,
    load_or_exit,
)
from depwitness.cli.output import print_error, print_json
from depwitness.core import VerificationEngine, render_assertion_block
from depwitness.exceptions import DepWitnessError


@click.command("calculate-checksums")
@descriptor_argument
@click.option(
    "--exclude", "-x",
    multiple=True,
    envvar="DEPWITNESS_EXCLUDE",
    help="Comma-separated configuration names or scoped names to skip.",
)
@format_option
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write the assertion block to this file.",
)
def checksums_command(
    descriptor: str,
    exclude: tuple[str, ...],
    output_format: str,
    output: str | None,
) -> None:
    """Print integrity assertions for the currently resolved dependencies.

    Exit code 0 on success, 2 on invalid input.
    """
    loaded = load_or_exit(descriptor)
    excluded = collect_exclusions(loaded, exclude)
    engine = VerificationEngine(loaded.project, excluded=excluded)
    try:
        assertions = engine.emit_assertions()
    except DepWitnessError as exc:
        print_error(str(exc))
        sys.exit(EXIT_USAGE)

    block = render_assertion_block(assertions)
    if output_format == "json":
        print_json({"project": loaded.project.name, "verify": assertions})
    else:
        click.echo(block)

    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(block + "\n", encoding="utf-8")
    sys.exit(EXIT_OK)
