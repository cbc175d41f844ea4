"""Dependency digest verification core.

The package is split into focused submodules:

- ``models``: Value objects (``DependencyKey``, ``ScopedName``,
  ``Assertion``, ``ConfigurationInfo``) and the ordered
  ``DependencyHashMap``.
- ``digest``: Streaming SHA-256 of artifact files.
- ``identity``: ``DependencyKey`` derivation from cache paths.
- ``collector``: Direct module dependencies of a configuration.
- ``engine``: Digest aggregation, assertion verification and emission.
- ``reporter``: Per-configuration dependency report.

All public names are re-exported here so that callers can simply write
``from depwitness.core import VerificationEngine``.
"""

from depwitness.core.collector import direct_module_dependencies
from depwitness.core.digest import digest
from depwitness.core.engine import (
    VerificationEngine,
    is_excluded,
    parse_exclusions,
    render_assertion_block,
)
from depwitness.core.identity import derive_key
from depwitness.core.models import (
    Assertion,
    ConfigurationInfo,
    DependencyHashMap,
    DependencyKey,
    DigestConflict,
    ScopedName,
)
from depwitness.core.reporter import describe_configurations, render_report

__all__ = [
    "Assertion",
    "ConfigurationInfo",
    "DependencyHashMap",
    "DependencyKey",
    "DigestConflict",
    "ScopedName",
    "VerificationEngine",
    "derive_key",
    "describe_configurations",
    "digest",
    "direct_module_dependencies",
    "is_excluded",
    "parse_exclusions",
    "render_assertion_block",
    "render_report",
]
