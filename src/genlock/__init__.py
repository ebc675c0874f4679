"""genlock: checksum ledger for generated files.

A code generator writes files; genlock records the SHA-256 of each one, keyed
by its declared path, in ``<output_dir>/gen/genlock.lock`` as soon as the file
is on disk.  Tooling can later compare a file's current hash against its
record to detect hand edits.

Version Management
------------------
``__version__`` is read from the installed package metadata at import time.
The single source of truth is the ``version`` field in ``pyproject.toml``.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("genlock")
except PackageNotFoundError:
    __version__ = "0.1.0"
