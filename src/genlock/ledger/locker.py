"""Checksum ledger for one generation pass.

Overview
--------
A :class:`Ledger` is built over the list of files a generation pass is about
to write.  :meth:`Ledger.lock` resets the ledger file and installs a finalize
hook on every file.  The pipeline then renders each file; once a file's bytes
are on disk its hook checksums them and appends one record::

    <declared path>::<sha256 hex>

The ledger is never re-read or rewritten after the reset.  Line order is the
order in which hooks fire, which need not match the order of ``files``.

Lifecycle
---------
1. ``Ledger(files, output_dir=...)`` resolves the ledger path once.
2. ``lock()`` checks that there is at least one file, creates the ``gen/``
   directory if needed, creates or truncates the ledger, then installs hooks.
   If preparing the file fails, no hook is installed.
3. Each hook runs once, from :meth:`~genlock.codegen.GeneratedFile.render`.

Concurrency
-----------
Appends take a per-instance :class:`threading.Lock` and an exclusive
``fcntl.flock`` on the ledger for the full open-append-close cycle, so hooks
fired from several threads (or processes sharing the file) never interleave
partial lines.  ``fcntl`` is POSIX-only.

Failure isolation
-----------------
A hook failure raises :exc:`~genlock.ledger.errors.ChecksumCreateError` or
:exc:`~genlock.ledger.errors.ChecksumWriteError` to the caller that fired it.
Records already written stay in place; other files' hooks are unaffected.
"""

from __future__ import annotations

import fcntl
import logging
import os
import threading
from collections.abc import Callable, Sequence
from pathlib import Path

from genlock.codegen import GeneratedFile
from genlock.ledger.checksum import file_checksum
from genlock.ledger.errors import (
    ChecksumCreateError,
    ChecksumWriteError,
    LedgerAlreadyLockedError,
    LedgerPrepareError,
    NoFilesDefinedError,
)
from genlock.ledger.paths import resolve_ledger_path
from genlock.ledger.records import LedgerRecord

logger = logging.getLogger(__name__)

# ── Permissions ───────────────────────────────────────────────────────────────
# Both are filtered through the process umask.
LEDGER_FILE_MODE = 0o777
LEDGER_DIR_MODE = 0o755


class Ledger:
    """The on-disk checksum ledger for one set of generated files.

    Attributes:
        files: The descriptors this ledger records.  May be empty at
               construction; :meth:`lock` rejects an empty list.
    """

    def __init__(
        self,
        files: Sequence[GeneratedFile],
        *,
        output_dir: str | os.PathLike[str] | None = None,
    ) -> None:
        """Bind the ledger to its resolved path.

        Args:
            files:      Generated-file descriptors for this pass.
            output_dir: Base output directory; ``None`` selects the working
                        directory.

        Raises:
            LedgerPathError: If the ledger path cannot be resolved.
        """
        self.files = list(files)
        self._path = resolve_ledger_path(output_dir)
        self._append_mutex = threading.Lock()
        self._locked = False

    def __repr__(self) -> str:
        return f"Ledger(path={str(self._path)!r}, files={len(self.files)})"

    @property
    def path(self) -> Path:
        """Absolute path of the ledger file, fixed at construction."""
        return self._path

    # ── Public API ────────────────────────────────────────────────────────────

    def lock(self) -> str:
        """Reset the ledger file and install a finalize hook on every file.

        Returns:
            The absolute ledger path as a string.

        Raises:
            NoFilesDefinedError:      ``files`` is empty.  Nothing on disk is
                                      touched.
            LedgerAlreadyLockedError: ``lock`` already ran on this instance.
            LedgerPrepareError:       The directory or file could not be
                                      created or truncated.  No hook is
                                      installed.
        """
        if not self.files:
            raise NoFilesDefinedError()
        if self._locked:
            raise LedgerAlreadyLockedError(f"ledger {str(self._path)!r} is already locked")

        self._prepare()
        self._locked = True

        for file in self.files:
            file.finalize_func = self._finalizer(file)

        logger.info("ledger: locked %s for %d file(s)", self._path, len(self.files))
        return str(self._path)

    def finalize(self, file: GeneratedFile, written_path: str | os.PathLike[str]) -> None:
        """Checksum *written_path* and record it under ``file.path``.

        *written_path* is where the pipeline actually wrote the bytes, which
        may differ from the declared path (for example a render directory).

        Raises:
            ChecksumCreateError: *written_path* could not be opened or read.
            ChecksumWriteError:  The ledger could not be appended to.
        """
        try:
            checksum = file_checksum(written_path)
        except (OSError, ValueError) as exc:
            raise ChecksumCreateError(file.path, exc) from exc

        record = LedgerRecord(path=file.path, checksum=checksum)
        try:
            self._append(record)
        except OSError as exc:
            raise ChecksumWriteError(self._path, exc) from exc

        logger.debug("ledger: recorded %s (%s)", file.path, checksum[:12])

    # ── Internal helpers ──────────────────────────────────────────────────────

    def _finalizer(self, file: GeneratedFile) -> Callable[[str], None]:
        """Build the hook for *file*; one call per file keeps each binding distinct."""

        def finalize(written_path: str) -> None:
            self.finalize(file, written_path)

        return finalize

    def _prepare(self) -> None:
        """Ensure the ledger directory exists and the ledger file is empty."""
        try:
            self._path.parent.mkdir(mode=LEDGER_DIR_MODE, parents=True, exist_ok=True)
            fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, LEDGER_FILE_MODE)
            os.close(fd)
        except OSError as exc:
            raise LedgerPrepareError(self._path, exc) from exc

    def _append(self, record: LedgerRecord) -> None:
        """Append *record* as one line under the instance and file locks."""
        with self._append_mutex:
            with open(self._path, "a", encoding="utf-8", newline="\n") as fh:
                fcntl.flock(fh, fcntl.LOCK_EX)
                try:
                    fh.write(record.format())
                    fh.flush()
                finally:
                    fcntl.flock(fh, fcntl.LOCK_UN)
