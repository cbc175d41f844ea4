"""Verification engine --- aggregate digests and check pinned assertions.

The engine scans every configuration of a project, ordinary and build-time,
and builds one canonical ``DependencyKey -> digest`` map from the direct
module dependencies it finds. That map is then used two ways:

- **verify:** every pinned assertion must name a key present in the map
  with exactly the pinned digest.
- **emit:** render the map as assertions, for pasting back into the
  project after an intentional dependency change.

Exclusion is hierarchical. A configuration is skipped when its own name or
scoped name, or that of any configuration it extends, is excluded, so
excluding a parent configuration also drops everything built on it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from depwitness.core.collector import direct_module_dependencies
from depwitness.core.digest import digest
from depwitness.core.identity import derive_key
from depwitness.core.models import (
    Assertion,
    DependencyHashMap,
    ScopedName,
)
from depwitness.exceptions import (
    ChecksumMismatchError,
    DigestConflictError,
    MissingDependencyError,
)
from depwitness.provider.model import Configuration, Project

logger = logging.getLogger(__name__)


def parse_exclusions(value: str | None) -> list[str]:
    """Split a comma-separated exclusion option into names.

    Whitespace around names and empty entries are dropped.
    """
    if not value:
        return []
    return [name.strip() for name in value.split(",") if name.strip()]


def is_excluded(
    project: Project, configuration: Configuration, excluded: set[str]
) -> bool:
    """Return True if the configuration or any of its ancestors is excluded."""
    if not excluded:
        return False
    for member in configuration.hierarchy:
        scoped = ScopedName(project.name, member.name)
        if member.name in excluded or str(scoped) in excluded:
            return True
    return False


class VerificationEngine:
    """Builds the digest map of a project and checks assertions against it.

    Example::

        engine = VerificationEngine(project, excluded=["lint"])
        engine.verify([
            "com.example:lib:1.0:lib-1.0.jar:9f86d081884c7d65...",
        ])

    Args:
        project: The project whose configurations are scanned.
        excluded: Configuration names or ``project:configuration`` scoped
            names to skip, together with everything that extends them.
        strict: Hash every duplicate key and fail when two configurations
            resolve different content for it. Lenient mode hashes a key
            once and keeps the first digest.
    """

    def __init__(
        self,
        project: Project,
        excluded: Iterable[str] = (),
        strict: bool = False,
    ) -> None:
        self.project = project
        self.excluded = set(excluded)
        self.strict = strict

    def build_hash_map(self) -> DependencyHashMap:
        """Scan all configurations and return the aggregated digest map.

        Raises:
            MalformedPathError: If a resolved artifact is not in the
                cache layout.
            UnreadableFileError: If an artifact cannot be hashed.
            DigestConflictError: In strict mode, if two configurations
                disagree on the digest of a key.
        """
        dependencies = DependencyHashMap()
        for configuration in self.project.all_configurations():
            scoped = ScopedName(self.project.name, configuration.name)
            if is_excluded(self.project, configuration, self.excluded):
                logger.warning("Skipping excluded configuration %s", scoped)
                continue
            if not configuration.resolvable:
                logger.debug("Skipping unresolvable configuration %s", scoped)
                continue
            for path in sorted(direct_module_dependencies(configuration)):
                key = derive_key(path)
                # Lenient mode keeps the first digest without rehashing.
                if key in dependencies and not self.strict:
                    continue
                dependencies.add(key, digest(path), scoped)

        for conflict in dependencies.conflicts:
            logger.warning(
                "Configuration %s resolved %s to %s, keeping %s",
                conflict.configuration, conflict.key.all,
                conflict.rejected, conflict.kept,
            )
        if self.strict and dependencies.conflicts:
            raise DigestConflictError(dependencies.conflicts)
        return dependencies

    def verify(self, assertions: Iterable[str]) -> int:
        """Check every assertion against a freshly built digest map.

        Stops at the first failing assertion.

        Args:
            assertions: ``group:name:version:file:digest`` strings.

        Returns:
            The number of assertions verified.

        Raises:
            MalformedAssertionError: If an assertion has the wrong shape.
            MissingDependencyError: If no resolved dependency matches.
            ChecksumMismatchError: If the digests differ.
        """
        dependencies = self.build_hash_map()
        checked = 0
        for text in assertions:
            assertion = Assertion.parse(text)
            logger.info("Verifying %s", assertion.key.all)
            actual = dependencies.get(assertion.key)
            if actual is None:
                raise MissingDependencyError(text)
            if actual != assertion.digest:
                raise ChecksumMismatchError(assertion.key, assertion.digest, actual)
            checked += 1
        return checked

    def emit_assertions(self) -> list[str]:
        """Return the current digest map as assertions, in key order."""
        return [
            f"{key.all}:{value}" for key, value in self.build_hash_map().items()
        ]


def render_assertion_block(assertions: Iterable[str]) -> str:
    """Render assertions as a paste-ready ``dependencyVerification`` block."""
    lines = ["dependencyVerification {", "    verify = ["]
    lines.extend(f"        '{assertion}'," for assertion in assertions)
    lines.extend(["    ]", "}"])
    return "\n".join(lines)
