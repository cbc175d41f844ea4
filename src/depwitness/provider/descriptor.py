"""Project descriptor loader.

A descriptor is a YAML (or JSON) export of one project's build model: its
configurations, their inheritance, the first-level dependencies each one
requested, and the artifact files it resolved to. It can also carry the
project's pinned assertions and its exclusion property, so one file is
enough to run ``depwitness verify``.

Example::

    project: app
    cache: /home/me/.gradle/caches/modules-2/files-2.1
    properties:
      noWitness: lint
    dependencyVerification:
      verify:
        - 'com.example:lib:1.0:lib-1.0.jar:9f86d0...'
    configurations:
      compile:
        dependencies:
          - module: com.example:lib:1.0
          - project: ':core'
        artifacts:
          - module: com.example:lib:1.0
            path: com.example/lib/1.0/356a19.../lib-1.0.jar
      testCompile:
        extendsFrom: [compile]
    buildscript:
      configurations:
        classpath: {}

Relative artifact paths resolve against ``cache``, or against the
descriptor's own directory when no cache is given.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from depwitness.exceptions import DescriptorError
from depwitness.provider.model import (
    Configuration,
    ConfigurationContainer,
    DependencyEdge,
    FileSelector,
    ModuleSelector,
    Project,
    ProjectSelector,
    ResolutionResult,
    ResolvedArtifact,
    ResolvedNode,
    Selector,
)

EXCLUSION_PROPERTY = "noWitness"


@dataclass
class ProjectDescriptor:
    """A loaded descriptor: the build model plus verification settings.

    Attributes:
        project: The project model.
        assertions: Pinned ``group:name:version:file:digest`` strings.
        exclusions: Raw comma-separated exclusion property, if set.
        source: File the descriptor was read from.
    """

    project: Project
    assertions: list[str] = field(default_factory=list)
    exclusions: str | None = None
    source: Path | None = None


def _parse_coordinate(source: Path, value: Any) -> tuple[str, str, str]:
    parts = str(value).split(":") if value is not None else []
    if len(parts) != 3 or not all(parts):
        raise DescriptorError(
            source, f"expected 'group:name:version' coordinate, got {value!r}"
        )
    return parts[0], parts[1], parts[2]


def _parse_edge(source: Path, entry: Any) -> DependencyEdge:
    if not isinstance(entry, dict) or len(entry) != 1:
        raise DescriptorError(
            source,
            f"dependency must be one of module/project/file, got {entry!r}",
        )
    kind, value = next(iter(entry.items()))
    requested: Selector
    if kind == "module":
        requested = ModuleSelector(*_parse_coordinate(source, value))
    elif kind == "project":
        requested = ProjectSelector(str(value))
    elif kind == "file":
        requested = FileSelector(str(value))
    else:
        raise DescriptorError(source, f"unknown dependency kind {kind!r}")
    return DependencyEdge(requested)


def _parse_artifact(source: Path, base: Path, entry: Any) -> ResolvedArtifact:
    if not isinstance(entry, dict) or "module" not in entry or "path" not in entry:
        raise DescriptorError(
            source, f"artifact needs 'module' and 'path', got {entry!r}"
        )
    group, name, version = _parse_coordinate(source, entry["module"])
    path = Path(str(entry["path"])).expanduser()
    if not path.is_absolute():
        path = base / path
    return ResolvedArtifact(group, name, version, path)


def _as_list(source: Path, value: Any, what: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise DescriptorError(source, f"{what} must be a list")
    return value


def _check_acyclic(
    source: Path, scope: str, configurations: dict[str, Configuration]
) -> None:
    """Reject inheritance cycles (DFS coloring)."""
    WHITE, GRAY, BLACK = 0, 1, 2
    color = {name: WHITE for name in configurations}

    def _dfs(cfg: Configuration) -> None:
        color[cfg.name] = GRAY
        for parent in cfg.extends_from:
            if color[parent.name] == GRAY:
                raise DescriptorError(
                    source,
                    f"{scope} configuration {cfg.name!r} has an inheritance "
                    f"cycle through {parent.name!r}",
                )
            if color[parent.name] == WHITE:
                _dfs(parent)
        color[cfg.name] = BLACK

    for name in sorted(configurations):
        if color[name] == WHITE:
            _dfs(configurations[name])


def _parse_configurations(
    source: Path, base: Path, scope: str, data: Any
) -> ConfigurationContainer:
    if data is None:
        return ConfigurationContainer()
    if not isinstance(data, dict):
        raise DescriptorError(source, f"{scope} configurations must be a mapping")

    configurations: dict[str, Configuration] = {}
    parents: dict[str, list[Any]] = {}
    for name, body in data.items():
        body = body or {}
        if not isinstance(body, dict):
            raise DescriptorError(source, f"configuration {name!r} must be a mapping")
        edges = [
            _parse_edge(source, e)
            for e in _as_list(source, body.get("dependencies"), "dependencies")
        ]
        artifacts = [
            _parse_artifact(source, base, a)
            for a in _as_list(source, body.get("artifacts"), "artifacts")
        ]
        resolvable = body.get("canBeResolved", True)
        if not isinstance(resolvable, bool):
            raise DescriptorError(
                source,
                f"canBeResolved of configuration {name!r} must be true or false, "
                f"got {resolvable!r}",
            )
        configurations[str(name)] = Configuration(
            name=str(name),
            resolvable=resolvable,
            artifacts=artifacts,
            resolution_result=ResolutionResult(ResolvedNode(edges)),
        )
        parents[str(name)] = _as_list(source, body.get("extendsFrom"), "extendsFrom")

    for name, parent_names in parents.items():
        for parent in parent_names:
            if str(parent) not in configurations:
                raise DescriptorError(
                    source,
                    f"{scope} configuration {name!r} extends unknown "
                    f"configuration {parent!r}",
                )
            configurations[name].extends_from.append(configurations[str(parent)])

    _check_acyclic(source, scope, configurations)
    return ConfigurationContainer(configurations.values())


def parse_descriptor(data: Any, source: Path) -> ProjectDescriptor:
    """Build a ``ProjectDescriptor`` from already-parsed YAML/JSON data.

    Raises:
        DescriptorError: If the data does not describe a valid project.
    """
    if not isinstance(data, dict):
        raise DescriptorError(source, "top level must be a mapping")
    if not data.get("project"):
        raise DescriptorError(source, "missing 'project' name")

    cache = data.get("cache")
    base = Path(str(cache)).expanduser() if cache else source.parent

    project = Project(name=str(data["project"]))
    project.configurations = _parse_configurations(
        source, base, "project", data.get("configurations")
    )
    buildscript = data.get("buildscript") or {}
    if not isinstance(buildscript, dict):
        raise DescriptorError(source, "buildscript must be a mapping")
    project.buildscript.configurations = _parse_configurations(
        source, base, "buildscript", buildscript.get("configurations")
    )

    verification = data.get("dependencyVerification") or {}
    if not isinstance(verification, dict):
        raise DescriptorError(source, "dependencyVerification must be a mapping")
    assertions = [
        str(a) for a in _as_list(source, verification.get("verify"), "verify")
    ]

    properties = data.get("properties") or {}
    if not isinstance(properties, dict):
        raise DescriptorError(source, "properties must be a mapping")
    exclusions = properties.get(EXCLUSION_PROPERTY)

    return ProjectDescriptor(
        project=project,
        assertions=assertions,
        exclusions=None if exclusions is None else str(exclusions),
        source=source,
    )


def load_project(path: Path) -> ProjectDescriptor:
    """Read a project descriptor from a YAML or JSON file.

    Args:
        path: Descriptor file.

    Returns:
        The loaded ``ProjectDescriptor``.

    Raises:
        DescriptorError: If the file cannot be read or is invalid.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
        data = yaml.safe_load(raw)
    except OSError as exc:
        raise DescriptorError(path, exc.strerror or str(exc)) from exc
    except yaml.YAMLError as exc:
        raise DescriptorError(path, f"not valid YAML/JSON: {exc}") from exc
    return parse_descriptor(data, path)
