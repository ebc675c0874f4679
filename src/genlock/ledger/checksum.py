"""Content checksums for generated files."""

from __future__ import annotations

import hashlib
import os

# Generated files are streamed through the digest in chunks of this size.
_CHUNK_BYTES = 1024 * 1024


def file_checksum(path: str | os.PathLike[str]) -> str:
    """Return the lowercase hex SHA-256 digest of the file at *path*.

    The file is streamed, so arbitrarily large outputs hash in constant
    memory.  Any :exc:`OSError` from open, read or close propagates; the
    finalize hook wraps it in :exc:`~genlock.ledger.errors.ChecksumCreateError`.
    """
    digest = hashlib.sha256()
    with open(path, "rb") as fh:
        for chunk in iter(lambda: fh.read(_CHUNK_BYTES), b""):
            digest.update(chunk)
    return digest.hexdigest()
