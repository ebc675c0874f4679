"""Ledger location resolution.

The ledger always lives at ``<output_dir>/gen/genlock.lock``.  The output
directory is supplied by the caller (the lock plugin reads it from
:mod:`genlock.config`); when it is absent the process working directory is
used.  Resolution is pure path arithmetic: nothing on disk is created or
inspected.
"""

from __future__ import annotations

import os
from pathlib import Path

from genlock.ledger.errors import LedgerPathError

# Location of the ledger relative to the output directory.
LEDGER_FILENAME = "gen/genlock.lock"


def resolve_ledger_path(output_dir: str | os.PathLike[str] | None = None) -> Path:
    """Return the absolute, normalized ledger path for *output_dir*.

    ``.`` and ``..`` segments and redundant separators are collapsed, so
    ``"///foo/bar/..//"`` and ``"/foo"`` resolve to the same ledger.

    Args:
        output_dir: Base output directory.  ``None`` or ``""`` selects the
                    current working directory.  Relative values are taken
                    relative to the working directory.

    Returns:
        Absolute :class:`~pathlib.Path` to the ledger file.

    Raises:
        LedgerPathError: If the working directory cannot be determined (for
                         example it was deleted) or *output_dir* contains a
                         NUL byte.
    """
    base = os.fspath(output_dir) if output_dir is not None else ""

    if "\x00" in base:
        raise LedgerPathError(base, ValueError("embedded null byte"))

    try:
        if not base:
            base = os.getcwd()
        # abspath also calls getcwd() for relative inputs.
        resolved = os.path.abspath(base + "/" + LEDGER_FILENAME)
    except OSError as exc:
        raise LedgerPathError(base or ".", exc) from exc

    # POSIX normpath keeps exactly two leading slashes.
    if resolved.startswith("//"):
        resolved = "/" + resolved.lstrip("/")

    return Path(resolved)
