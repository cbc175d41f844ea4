"""Build model consumed by the verification core.

The host build tool owns configuration discovery and dependency resolution.
These classes describe the part of its model that depwitness reads: named
configurations with an inheritance hierarchy, a resolvability flag, the
flattened set of resolved artifact files, and the first-level edges of the
resolution result. Any provider (the bundled descriptor loader, or an
adapter around a live build) only has to populate them.

Selectors distinguish what a first-level dependency edge asked for:

- ``ModuleSelector``: a named ``group:module:version`` coordinate.
- ``ProjectSelector``: another project of the same build.
- ``FileSelector``: a local file dependency.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union


# ---------------------------------------------------------------------------
# Requested selectors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ModuleSelector:
    """A dependency requested by module coordinate."""

    group: str
    module: str
    version: str

    @property
    def coordinate(self) -> str:
        """Return ``group:module:version``."""
        return f"{self.group}:{self.module}:{self.version}"


@dataclass(frozen=True)
class ProjectSelector:
    """A dependency on another project of the same build (e.g. ``:core``)."""

    path: str


@dataclass(frozen=True)
class FileSelector:
    """A dependency on a local file outside any repository."""

    path: str


Selector = Union[ModuleSelector, ProjectSelector, FileSelector]


# ---------------------------------------------------------------------------
# Resolution result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DependencyEdge:
    """A first-level edge leaving the root of a resolution result."""

    requested: Selector


@dataclass
class ResolvedNode:
    """The root component of a resolved configuration."""

    dependencies: list[DependencyEdge] = field(default_factory=list)


@dataclass
class ResolutionResult:
    """Result of resolving one configuration."""

    root: ResolvedNode = field(default_factory=ResolvedNode)


@dataclass(frozen=True)
class ResolvedArtifact:
    """One resolved file together with the coordinate that produced it.

    Attributes:
        group: Group of the owning module.
        name: Name of the owning module.
        version: Resolved version of the owning module.
        path: Local path of the artifact inside the dependency cache.
    """

    group: str
    name: str
    version: str
    path: Path

    @property
    def coordinate(self) -> str:
        """Return ``group:name:version``."""
        return f"{self.group}:{self.name}:{self.version}"


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class Configuration:
    """A named, inheritable bucket of dependency declarations.

    Attributes:
        name: Configuration name, unique within its container.
        resolvable: False for configurations that only exist to be
            extended. Resolving those is an error in the host tool, so
            consumers check this flag before touching ``artifacts``.
        extends_from: Configurations this one directly extends.
        artifacts: Flattened resolved files, transitive ones included.
        resolution_result: Resolution graph rooted at this configuration.
    """

    name: str
    resolvable: bool = True
    extends_from: list[Configuration] = field(default_factory=list)
    artifacts: list[ResolvedArtifact] = field(default_factory=list)
    resolution_result: ResolutionResult = field(default_factory=ResolutionResult)

    @property
    def hierarchy(self) -> list[Configuration]:
        """Return this configuration and everything it transitively extends.

        The configuration itself comes first, followed by its ancestors
        depth-first in declaration order. Each configuration appears once.
        """
        seen: set[int] = set()
        ordered: list[Configuration] = []

        def _walk(cfg: Configuration) -> None:
            if id(cfg) in seen:
                return
            seen.add(id(cfg))
            ordered.append(cfg)
            for parent in cfg.extends_from:
                _walk(parent)

        _walk(self)
        return ordered

    def __repr__(self) -> str:
        return f"Configuration({self.name!r})"


class ConfigurationContainer:
    """Named configurations of one scope, iterated in name order."""

    def __init__(self, configurations: Iterable[Configuration] = ()) -> None:
        self._by_name: dict[str, Configuration] = {}
        for cfg in configurations:
            self.add(cfg)

    def add(self, configuration: Configuration) -> None:
        """Add a configuration, replacing any with the same name."""
        self._by_name[configuration.name] = configuration

    def get(self, name: str) -> Configuration | None:
        """Return the configuration called ``name``, or None."""
        return self._by_name.get(name)

    def __getitem__(self, name: str) -> Configuration:
        return self._by_name[name]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Configuration]:
        for name in sorted(self._by_name):
            yield self._by_name[name]

    def __len__(self) -> int:
        return len(self._by_name)


@dataclass
class BuildScript:
    """Build-time scope of a project (plugins and build logic classpath)."""

    configurations: ConfigurationContainer = field(
        default_factory=ConfigurationContainer
    )


@dataclass
class Project:
    """A project exposing ordinary and build-time configurations."""

    name: str
    configurations: ConfigurationContainer = field(
        default_factory=ConfigurationContainer
    )
    buildscript: BuildScript = field(default_factory=BuildScript)

    def all_configurations(self) -> Iterator[Configuration]:
        """Yield ordinary configurations, then build-time ones."""
        yield from self.configurations
        yield from self.buildscript.configurations
