"""Build model providers.

``model`` defines the configuration interface the core consumes;
``descriptor`` loads that model from a YAML or JSON project descriptor.
"""

from depwitness.provider.descriptor import ProjectDescriptor, load_project
from depwitness.provider.model import (
    BuildScript,
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
)

__all__ = [
    "BuildScript",
    "Configuration",
    "ConfigurationContainer",
    "DependencyEdge",
    "FileSelector",
    "ModuleSelector",
    "Project",
    "ProjectDescriptor",
    "ProjectSelector",
    "ResolutionResult",
    "ResolvedArtifact",
    "ResolvedNode",
    "load_project",
]
