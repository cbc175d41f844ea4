"""depwitness exception hierarchy.

All public exceptions inherit from DepWitnessError, giving callers a single
base class to catch when they want to handle any depwitness-specific failure
without swallowing unrelated errors. Every one of them is fatal: a build that
hits any of these must stop.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class DepWitnessError(Exception):
    """Base exception for all depwitness errors."""


class MalformedPathError(DepWitnessError):
    """Raised when an artifact path does not follow the cache layout.

    The identity of an artifact is read from the last five segments of
    its path (``group/name/version/checksum/file``). A shorter path means
    the artifact was not resolved through the expected cache.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(
            f"Cannot derive dependency identity from {self.path!r}: "
            "expected '.../group/name/version/checksum/file'"
        )


class MalformedAssertionError(DepWitnessError):
    """Raised when an assertion is not ``group:name:version:file:digest``."""

    def __init__(self, assertion: str) -> None:
        self.assertion = assertion
        super().__init__(f"Invalid or obsolete integrity assertion '{assertion}'")


class MissingDependencyError(DepWitnessError):
    """Raised when an assertion names a dependency that was not resolved.

    Covers dependencies that were removed or renamed as well as typos in
    the assertion itself.
    """

    def __init__(self, assertion: str) -> None:
        self.assertion = assertion
        super().__init__(f"No dependency for integrity assertion '{assertion}'")


class ChecksumMismatchError(DepWitnessError):
    """Raised when a resolved artifact does not match its pinned digest."""

    def __init__(self, key: Any, expected: str, actual: str) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(f"Checksum failed for {key.all}")


class UnreadableFileError(DepWitnessError):
    """Raised when an artifact file cannot be read for hashing."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = str(path)
        message = f"Cannot read artifact {self.path!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DigestConflictError(DepWitnessError):
    """Raised in strict mode when configurations disagree on a digest.

    The same identity key resolved to different content in two
    configurations, which points at a corrupted or tampered local cache.
    """

    def __init__(self, conflicts: list[Any]) -> None:
        self.conflicts = list(conflicts)
        keys = ", ".join(c.key.all for c in self.conflicts)
        super().__init__(f"Conflicting digests for {keys}")


class DescriptorError(DepWitnessError):
    """Raised when a project descriptor file cannot be loaded.

    Covers unreadable files, invalid YAML/JSON, missing required keys,
    bad coordinates and broken configuration inheritance.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid project descriptor {self.path!r}: {reason}")
