"""Allow ``python -m depwitness.cli``."""

from depwitness.cli.main import cli

cli()
