"""Dependency identity derived from the artifact cache layout.

Cached artifacts live at ``.../group/name/version/checksum/file``. The
checksum directory is the cache's own transport hash and is ignored; the
digest that gets verified is always recomputed from content.
"""

from __future__ import annotations

from pathlib import PurePath

from depwitness.core.models import DependencyKey
from depwitness.exceptions import MalformedPathError

_LAYOUT_DEPTH = 5


def derive_key(path: str | PurePath) -> DependencyKey:
    """Map an artifact cache path to its ``DependencyKey``.

    Only the last five path segments are read, so the cache root the
    artifact lives under does not affect the result.

    Raises:
        MalformedPathError: If the path has fewer than five segments.
    """
    pure = PurePath(path)
    parts = [p for p in pure.parts if p and p != pure.anchor]
    if len(parts) < _LAYOUT_DEPTH:
        raise MalformedPathError(path)
    group, name, version, _checksum, file = parts[-_LAYOUT_DEPTH:]
    return DependencyKey(group, name, version, file)
