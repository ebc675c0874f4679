"""Ledger package: checksum records for generated files.

After a code generator writes each file, the ledger appends the SHA-256 of
its content, keyed by the file's declared path, to
``<output_dir>/gen/genlock.lock``.  Downstream tooling compares the current
content hash of a generated file against its record to spot hand edits.

Public surface
--------------
- :class:`Ledger`              : resets the ledger and installs finalize hooks.
- :func:`resolve_ledger_path`  : deterministic, normalized ledger location.
- :func:`file_checksum`        : streamed SHA-256 hex digest of a file.
- :class:`LedgerRecord`        : one ``<path>::<checksum>`` line.
- :func:`read_ledger`          : parse a ledger file back into records.
- :exc:`LedgerError` and subclasses: the failure taxonomy.

Usage example
-------------
::

    from genlock.ledger import Ledger

    ledger = Ledger(files, output_dir="build")
    ledger_path = ledger.lock()
    for f in files:
        f.render("build")   # each render fires that file's hook

Design notes
------------
- The ledger is truncated once per :meth:`Ledger.lock` and only appended to
  afterwards.
- A missing record means "not tracked", never "unchanged".
"""

from genlock.ledger.checksum import file_checksum
from genlock.ledger.errors import (
    ChecksumCreateError,
    ChecksumWriteError,
    LedgerAlreadyLockedError,
    LedgerError,
    LedgerPathError,
    LedgerPrepareError,
    NoFilesDefinedError,
)
from genlock.ledger.locker import Ledger
from genlock.ledger.paths import LEDGER_FILENAME, resolve_ledger_path
from genlock.ledger.records import LedgerRecord, read_ledger

__all__ = [
    "LEDGER_FILENAME",
    "ChecksumCreateError",
    "ChecksumWriteError",
    "Ledger",
    "LedgerAlreadyLockedError",
    "LedgerError",
    "LedgerPathError",
    "LedgerPrepareError",
    "LedgerRecord",
    "NoFilesDefinedError",
    "file_checksum",
    "read_ledger",
    "resolve_ledger_path",
]
