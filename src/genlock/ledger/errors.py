"""Typed exceptions for the ledger package.

Every failure the ledger can produce is a subclass of :exc:`LedgerError`, so
a generation pipeline can catch the whole family in one place while still
telling the cases apart.

Design intent:
    - Precondition failures (:exc:`NoFilesDefinedError`,
      :exc:`LedgerAlreadyLockedError`) are raised before any filesystem
      operation.
    - Infrastructure failures wrap the underlying :exc:`OSError` and carry the
      path they concern, so the per-file hook error names the generated file
      and the append error names the ledger.
"""

from __future__ import annotations

from pathlib import Path


class LedgerError(RuntimeError):
    """Base exception for ledger failures."""


class NoFilesDefinedError(LedgerError):
    """Raised by ``Ledger.lock`` when the ledger was built with no files."""

    def __init__(self) -> None:
        super().__init__("no files defined")


class LedgerAlreadyLockedError(LedgerError):
    """Raised when ``Ledger.lock`` is called twice on the same instance."""


class LedgerPathOperationError(LedgerError):
    """Base for failures that concern one filesystem path.

    Args:
        prefix: Fixed description of the failed operation.
        path: Path the operation was working on.
        cause: Underlying exception, usually an :exc:`OSError`.
    """

    def __init__(self, prefix: str, path: str | Path, cause: Exception | None = None) -> None:
        message = f"{prefix} ({str(path)!r})"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.path = str(path)
        self.cause = cause


class LedgerPathError(LedgerPathOperationError):
    """Ledger location could not be resolved."""

    def __init__(self, path: str | Path, cause: Exception | None = None) -> None:
        super().__init__("failed to resolve ledger path", path, cause)


class LedgerPrepareError(LedgerPathOperationError):
    """Ledger directory or file could not be created or truncated."""

    def __init__(self, path: str | Path, cause: Exception | None = None) -> None:
        super().__init__("failed to prepare lock file", path, cause)


class ChecksumCreateError(LedgerPathOperationError):
    """A generated file could not be read when its finalize hook fired.

    ``path`` is the file's declared path, not the render target.
    """

    def __init__(self, path: str | Path, cause: Exception | None = None) -> None:
        super().__init__("failed to create checksum from file", path, cause)


class ChecksumWriteError(LedgerPathOperationError):
    """A record could not be appended to the ledger file."""

    def __init__(self, path: str | Path, cause: Exception | None = None) -> None:
        super().__init__("failed to write checksum to file", path, cause)
