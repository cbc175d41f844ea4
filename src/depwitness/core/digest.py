"""Content digests for resolved artifacts.

Artifacts can be arbitrarily large, so the file is streamed through an
incremental SHA-256 in fixed-size chunks. Only the bytes enter the digest;
timestamps, permissions and the file name do not.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

from depwitness.exceptions import UnreadableFileError

DIGEST_ALGORITHM: str = "sha256"
CHUNK_SIZE: int = 4096


def digest(path: Path) -> str:
    """Return the lowercase hex SHA-256 digest of a file's content.

    Args:
        path: Artifact file to hash.

    Returns:
        64 lowercase hex characters.

    Raises:
        UnreadableFileError: If the file cannot be opened or read.
    """
    md = hashlib.new(DIGEST_ALGORITHM)
    try:
        with Path(path).open("rb") as fh:
            for chunk in iter(lambda: fh.read(CHUNK_SIZE), b""):
                md.update(chunk)
    except OSError as exc:
        raise UnreadableFileError(path, exc.strerror or str(exc)) from exc
    return md.hexdigest()
