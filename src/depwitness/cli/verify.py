"""``depwitness verify <descriptor>`` --- Check pinned dependency digests.

Loads the project descriptor, hashes the direct module dependencies of
every configuration that is not excluded, and checks each pinned assertion
against the result. The first failing assertion stops the run.

Exit Codes:
    0 --- Every assertion matched.
    1 --- A digest differed, a pinned dependency is missing, or
          configurations disagreed on a digest in strict mode.
    2 --- The descriptor, an assertion or an artifact path is invalid,
          or an artifact could not be read.
"""

from __future__ import annotations

import sys

import click

from depwitness.cli.options import (
    EXIT_OK,
    EXIT_USAGE,
    EXIT_VERIFICATION_FAILED,
    collect_exclusions,
    descriptor_argument,
    load_or_exit,
)
from depwitness.cli.output import (
    print_conflicts,
    print_error,
    print_verification_summary,
)
from depwitness.core import VerificationEngine
from depwitness.exceptions import (
    ChecksumMismatchError,
    DepWitnessError,
    DigestConflictError,
    MissingDependencyError,
)


@click.command("verify")
@descriptor_argument
@click.option(
    "--exclude", "-x",
    multiple=True,
    envvar="DEPWITNESS_EXCLUDE",
    help="Comma-separated configuration names or project:configuration "
         "scoped names to skip, with everything extending them.",
)
@click.option(
    "--assertion", "-a", "extra_assertions",
    multiple=True,
    help="Additional group:name:version:file:digest assertion to check.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail when configurations resolve different content for one dependency.",
)
def verify_command(
    descriptor: str,
    exclude: tuple[str, ...],
    extra_assertions: tuple[str, ...],
    strict: bool,
) -> None:
    """Verify resolved dependencies against their pinned digests.

    Checks every assertion listed under ``dependencyVerification.verify``
    in DESCRIPTOR, plus any given with --assertion.

    Exit code 0 if all assertions hold, 1 on a verification failure,
    2 on invalid input.
    """
    loaded = load_or_exit(descriptor)
    excluded = collect_exclusions(loaded, exclude)
    assertions = [*loaded.assertions, *extra_assertions]

    engine = VerificationEngine(loaded.project, excluded=excluded, strict=strict)
    try:
        checked = engine.verify(assertions)
    except DigestConflictError as exc:
        print_conflicts(exc.conflicts)
        print_error(str(exc))
        sys.exit(EXIT_VERIFICATION_FAILED)
    except (ChecksumMismatchError, MissingDependencyError) as exc:
        print_error(str(exc))
        sys.exit(EXIT_VERIFICATION_FAILED)
    except DepWitnessError as exc:
        print_error(str(exc))
        sys.exit(EXIT_USAGE)

    print_verification_summary(loaded.project.name, checked, excluded)
    sys.exit(EXIT_OK)
