"""Direct module dependencies of a configuration.

A configuration's resolved file set is flattened: it holds transitive
dependencies next to the declared ones. Only dependencies that were
requested by module coordinate directly on the configuration are collected
here. Project and file dependencies are never collected.
"""

from __future__ import annotations

from pathlib import Path

from depwitness.provider.model import Configuration, ModuleSelector


def requested_modules(configuration: Configuration) -> set[str]:
    """Return ``group:module:version`` of each first-level module edge."""
    modules: set[str] = set()
    for edge in configuration.resolution_result.root.dependencies:
        if isinstance(edge.requested, ModuleSelector):
            modules.add(edge.requested.coordinate)
    return modules


def direct_module_dependencies(configuration: Configuration) -> set[Path]:
    """Return the artifact files of the configuration's direct module deps.

    Args:
        configuration: A resolvable configuration.

    Returns:
        Paths of every resolved artifact whose coordinate was requested
        directly. Empty when there are none.
    """
    modules = requested_modules(configuration)
    if not modules:
        return set()
    return {
        artifact.path
        for artifact in configuration.artifacts
        if artifact.coordinate in modules
    }
