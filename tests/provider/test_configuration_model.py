"""Tests for the build model consumed by the core."""

from __future__ import annotations

from pathlib import Path

from depwitness.provider.model import (
    Configuration,
    ConfigurationContainer,
    ModuleSelector,
    ResolvedArtifact,
)


class TestHierarchy:

    def test_self_first(self) -> None:
        cfg = Configuration("compile")
        assert cfg.hierarchy == [cfg]

    def test_depth_first_declaration_order(self) -> None:
        a = Configuration("a")
        b = Configuration("b", extends_from=[a])
        c = Configuration("c")
        d = Configuration("d", extends_from=[b, c])
        assert [x.name for x in d.hierarchy] == ["d", "b", "a", "c"]

    def test_diamond_listed_once(self) -> None:
        base = Configuration("base")
        left = Configuration("left", extends_from=[base])
        right = Configuration("right", extends_from=[base])
        top = Configuration("top", extends_from=[left, right])
        assert [x.name for x in top.hierarchy] == ["top", "left", "base", "right"]


class TestConfigurationContainer:

    def test_iterates_in_name_order(self) -> None:
        container = ConfigurationContainer(
            [Configuration("runtime"), Configuration("compile"), Configuration("api")]
        )
        assert [c.name for c in container] == ["api", "compile", "runtime"]
        assert len(container) == 3

    def test_lookup(self) -> None:
        compile_cfg = Configuration("compile")
        container = ConfigurationContainer([compile_cfg])
        assert container["compile"] is compile_cfg
        assert container.get("missing") is None
        assert "compile" in container


class TestCoordinates:

    def test_selector_coordinate(self) -> None:
        assert ModuleSelector("g", "m", "1.0").coordinate == "g:m:1.0"

    def test_artifact_coordinate(self) -> None:
        artifact = ResolvedArtifact("g", "n", "1.0", Path("g/n/1.0/c/n-1.0.jar"))
        assert artifact.coordinate == "g:n:1.0"
