"""Verification data models.

Defines the value objects shared by the verification engine and the graph
reporter: the dependency identity key, the scoped configuration name, parsed
assertions, per-configuration report records and the ordered digest map.
These carry no I/O, so they are safe to import from anywhere.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from depwitness.exceptions import MalformedAssertionError

# ---------------------------------------------------------------------------
# DependencyKey: identity of one resolved artifact
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DependencyKey:
    """Identity of a dependency artifact.

    The ``file`` component is part of identity so that several artifacts
    published under one module version (main jar, sources jar, ...) are
    pinned separately.

    Keys order lexicographically by their ``all`` form, which is also the
    order every digest map and assertion listing is rendered in.

    Attributes:
        group: Module group (e.g. "com.squareup.okhttp3").
        name: Module name (e.g. "okhttp").
        version: Resolved version (e.g. "4.12.0").
        file: Artifact file name (e.g. "okhttp-4.12.0.jar").
    """

    group: str
    name: str
    version: str
    file: str

    @property
    def all(self) -> str:
        """Return the canonical ``group:name:version:file`` form."""
        return f"{self.group}:{self.name}:{self.version}:{self.file}"

    def __lt__(self, other: DependencyKey) -> bool:
        if not isinstance(other, DependencyKey):
            return NotImplemented
        return self.all < other.all

    def __le__(self, other: DependencyKey) -> bool:
        if not isinstance(other, DependencyKey):
            return NotImplemented
        return self.all <= other.all

    def __gt__(self, other: DependencyKey) -> bool:
        if not isinstance(other, DependencyKey):
            return NotImplemented
        return self.all > other.all

    def __ge__(self, other: DependencyKey) -> bool:
        if not isinstance(other, DependencyKey):
            return NotImplemented
        return self.all >= other.all

    def __str__(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"


# ---------------------------------------------------------------------------
# ScopedName: a configuration qualified by its project
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class ScopedName:
    """A configuration name qualified by its owning project."""

    project: str
    configuration: str

    def __str__(self) -> str:
        return f"{self.project}:{self.configuration}"


# ---------------------------------------------------------------------------
# Assertion: a pinned digest supplied by the user
# ---------------------------------------------------------------------------

_ASSERTION_FIELDS = 5


@dataclass(frozen=True)
class Assertion:
    """A user-declared expected digest for one dependency key."""

    key: DependencyKey
    digest: str
    text: str

    @classmethod
    def parse(cls, text: str) -> Assertion:
        """Parse ``group:name:version:file:digest``.

        Raises:
            MalformedAssertionError: If the string does not split into
                exactly five non-empty colon-separated parts.
        """
        parts = text.strip().split(":")
        if len(parts) != _ASSERTION_FIELDS or not all(parts):
            raise MalformedAssertionError(text)
        group, name, version, file, digest = parts
        return cls(DependencyKey(group, name, version, file), digest, text)


# ---------------------------------------------------------------------------
# ConfigurationInfo: one entry of the configuration report
# ---------------------------------------------------------------------------


@dataclass
class ConfigurationInfo:
    """Reporting record for a single configuration.

    Attributes:
        super_configurations: Names of every configuration this one
            transitively extends, in hierarchy order, excluding itself.
        dependencies: Sorted ``"<key.all>:<digest>"`` lines for the
            configuration's direct module dependencies.
    """

    super_configurations: list[str] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# DependencyHashMap: ordered key -> digest mapping
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DigestConflict:
    """Two configurations resolved different content for the same key."""

    key: DependencyKey
    kept: str
    rejected: str
    configuration: ScopedName


class DependencyHashMap:
    """Mapping of ``DependencyKey`` to content digest, first writer wins.

    Iteration always follows ``DependencyKey`` ordering regardless of
    insertion order. A key keeps the digest it was first added with;
    a later, different digest is recorded as a ``DigestConflict`` and
    otherwise ignored.
    """

    def __init__(self) -> None:
        self._digests: dict[DependencyKey, str] = {}
        self._conflicts: list[DigestConflict] = []

    def add(self, key: DependencyKey, digest: str, source: ScopedName) -> bool:
        """Insert ``key`` unless already present.

        Returns:
            True if the entry was stored, False if the key already existed.
        """
        existing = self._digests.get(key)
        if existing is None:
            self._digests[key] = digest
            return True
        if existing != digest:
            self._conflicts.append(DigestConflict(key, existing, digest, source))
        return False

    def get(self, key: DependencyKey) -> str | None:
        """Return the digest stored for ``key``, or None."""
        return self._digests.get(key)

    @property
    def conflicts(self) -> list[DigestConflict]:
        """Return digest conflicts seen while populating the map."""
        return list(self._conflicts)

    def items(self) -> list[tuple[DependencyKey, str]]:
        """Return ``(key, digest)`` pairs in key order."""
        return [(key, self._digests[key]) for key in sorted(self._digests)]

    def __contains__(self, key: object) -> bool:
        return key in self._digests

    def __iter__(self) -> Iterator[DependencyKey]:
        return iter(sorted(self._digests))

    def __len__(self) -> int:
        return len(self._digests)
