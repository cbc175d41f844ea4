"""Shared fixtures for depwitness tests.

Artifacts are written into a temporary directory laid out like a
dependency cache (``group/name/version/checksum/file``) so that the real
identity derivation and hashing code runs against them.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from depwitness.provider.model import (
    Configuration,
    DependencyEdge,
    ModuleSelector,
    Project,
    ResolutionResult,
    ResolvedArtifact,
    ResolvedNode,
)


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    """Root of a temporary artifact cache."""
    root = tmp_path / "caches" / "files-2.1"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def make_artifact(cache_dir: Path) -> Callable[..., ResolvedArtifact]:
    """Factory writing an artifact into the cache and describing it.

    Usage: ``make_artifact("com.example:lib:1.0", content=b"...")``. The
    file name defaults to ``<name>-<version>.jar``.
    """

    def _make(
        coordinate: str,
        content: bytes = b"artifact",
        file_name: str | None = None,
        checksum: str = "da39a3ee5e6b4b0d3255bfef95601890afd80709",
    ) -> ResolvedArtifact:
        group, name, version = coordinate.split(":")
        file_name = file_name or f"{name}-{version}.jar"
        path = cache_dir / group / name / version / checksum / file_name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return ResolvedArtifact(group, name, version, path)

    return _make


def build_configuration(
    name: str,
    direct: list[ResolvedArtifact] | None = None,
    transitive: list[ResolvedArtifact] | None = None,
    extends_from: list[Configuration] | None = None,
    resolvable: bool = True,
    extra_edges: list[DependencyEdge] | None = None,
) -> Configuration:
    """Build a configuration whose first-level edges request ``direct``."""
    direct = direct or []
    edges: list[DependencyEdge] = []
    seen: set[str] = set()
    for artifact in direct:
        if artifact.coordinate not in seen:
            seen.add(artifact.coordinate)
            edges.append(DependencyEdge(
                ModuleSelector(artifact.group, artifact.name, artifact.version)
            ))
    edges.extend(extra_edges or [])
    return Configuration(
        name=name,
        resolvable=resolvable,
        extends_from=list(extends_from or []),
        artifacts=[*direct, *(transitive or [])],
        resolution_result=ResolutionResult(ResolvedNode(edges)),
    )


@pytest.fixture
def make_configuration() -> Callable[..., Configuration]:
    """Factory for configurations; see ``build_configuration``."""
    return build_configuration


@pytest.fixture
def make_project() -> Callable[..., Project]:
    """Factory for a project from ordinary and build-time configurations."""

    def _make(
        name: str = "app",
        configurations: list[Configuration] | None = None,
        buildscript: list[Configuration] | None = None,
    ) -> Project:
        project = Project(name)
        for cfg in configurations or []:
            project.configurations.add(cfg)
        for cfg in buildscript or []:
            project.buildscript.configurations.add(cfg)
        return project

    return _make
