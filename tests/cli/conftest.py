"""Shared fixtures for CLI tests.

Provides a project descriptor on disk backed by a small artifact cache:
``compile`` directly depends on ``com.example:lib:1.0`` (which pulls in
``com.squareup.okio:okio:3.6.0`` transitively), ``testCompile`` extends
``compile`` and adds ``junit:junit:4.13.2``, and the build script
classpath holds one plugin.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

ARTIFACTS = {
    "com.example:lib:1.0": b"lib content",
    "com.squareup.okio:okio:3.6.0": b"okio content",
    "junit:junit:4.13.2": b"junit content",
    "org.plugins:plugin:3.1": b"plugin content",
}


def _cache_path(coordinate: str) -> str:
    group, name, version = coordinate.split(":")
    return f"{group}/{name}/{version}/0a1b2c/{name}-{version}.jar"


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def expected_assertions() -> list[str]:
    """Assertions matching the cache written by ``project_dir``."""
    lines = []
    for coordinate in ["com.example:lib:1.0", "junit:junit:4.13.2", "org.plugins:plugin:3.1"]:
        _, name, version = coordinate.split(":")
        digest = hashlib.sha256(ARTIFACTS[coordinate]).hexdigest()
        lines.append(f"{coordinate}:{name}-{version}.jar:{digest}")
    return sorted(lines)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Write the artifact cache into ``tmp_path/cache``."""
    cache = tmp_path / "cache"
    for coordinate, content in ARTIFACTS.items():
        path = cache / _cache_path(coordinate)
        path.parent.mkdir(parents=True)
        path.write_bytes(content)
    return tmp_path


@pytest.fixture
def write_descriptor(project_dir: Path):
    """Factory writing a descriptor with the given verify list and extras."""

    def _write(verify: list[str] | None = None, **extra) -> Path:
        data = {
            "project": "app",
            "cache": str(project_dir / "cache"),
            "configurations": {
                "api": {"canBeResolved": False},
                "compile": {
                    "extendsFrom": ["api"],
                    "dependencies": [
                        {"module": "com.example:lib:1.0"},
                        {"project": ":core"},
                    ],
                    "artifacts": [
                        {"module": "com.example:lib:1.0",
                         "path": _cache_path("com.example:lib:1.0")},
                        {"module": "com.squareup.okio:okio:3.6.0",
                         "path": _cache_path("com.squareup.okio:okio:3.6.0")},
                    ],
                },
                "testCompile": {
                    "extendsFrom": ["compile"],
                    "dependencies": [{"module": "junit:junit:4.13.2"}],
                    "artifacts": [
                        {"module": "junit:junit:4.13.2",
                         "path": _cache_path("junit:junit:4.13.2")},
                    ],
                },
            },
            "buildscript": {
                "configurations": {
                    "classpath": {
                        "dependencies": [{"module": "org.plugins:plugin:3.1"}],
                        "artifacts": [
                            {"module": "org.plugins:plugin:3.1",
                             "path": _cache_path("org.plugins:plugin:3.1")},
                        ],
                    },
                },
            },
        }
        if verify is not None:
            data["dependencyVerification"] = {"verify": verify}
        data.update(extra)
        path = project_dir / "build-model.yaml"
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def lib_jar(project_dir: Path) -> Path:
    """Path of the cached ``com.example:lib:1.0`` jar."""
    return project_dir / "cache" / _cache_path("com.example:lib:1.0")
