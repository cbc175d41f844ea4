"""Configuration graph report.

Lists, for every resolvable configuration of a project, the configurations
it extends and the digests of its direct module dependencies. The report
is exhaustive: exclusions that silence verification do not apply here.
"""

from __future__ import annotations

from depwitness.core.collector import direct_module_dependencies
from depwitness.core.digest import digest
from depwitness.core.identity import derive_key
from depwitness.core.models import ConfigurationInfo, ScopedName
from depwitness.provider.model import Configuration, Project


def describe_configuration(configuration: Configuration) -> ConfigurationInfo:
    """Build the report record for one resolvable configuration."""
    super_configurations = [
        member.name
        for member in configuration.hierarchy
        if member.name != configuration.name
    ]
    dependencies = sorted(
        f"{derive_key(path).all}:{digest(path)}"
        for path in direct_module_dependencies(configuration)
    )
    return ConfigurationInfo(super_configurations, dependencies)


def describe_configurations(project: Project) -> dict[ScopedName, ConfigurationInfo]:
    """Describe every resolvable configuration, ordered by scoped name.

    Build-time configurations are included. When an ordinary and a
    build-time configuration share a name, the build-time one is reported.
    """
    infos: dict[ScopedName, ConfigurationInfo] = {}
    for configuration in project.all_configurations():
        if not configuration.resolvable:
            continue
        scoped = ScopedName(project.name, configuration.name)
        infos[scoped] = describe_configuration(configuration)
    return dict(sorted(infos.items()))


def render_report(infos: dict[ScopedName, ConfigurationInfo]) -> str:
    """Render configuration records as indented plain text."""
    lines: list[str] = []
    for scoped, info in infos.items():
        lines.append(f"{scoped}:")
        lines.append("    superconfigurations:")
        lines.extend(f"        {name}" for name in info.super_configurations)
        lines.append("    dependencies:")
        lines.extend(f"        {dep}" for dep in info.dependencies)
    return "\n".join(lines)
