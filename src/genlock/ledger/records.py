"""Ledger line format.

Each line of a ledger is one record::

    <declared path>::<sha256 hex>

There is no header, footer or metadata line.  Paths are written verbatim and
may themselves contain ``::``; the checksum never does, so parsing splits on
the last separator.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

RECORD_SEPARATOR = "::"


@dataclass(frozen=True)
class LedgerRecord:
    """One generated file's checksum as stored in the ledger.

    Attributes:
        path:     Declared destination path of the generated file.
        checksum: Hex-encoded SHA-256 of the file's final written bytes.
    """

    path: str
    checksum: str

    def format(self) -> str:
        """Return the record as a newline-terminated ledger line."""
        return f"{self.path}{RECORD_SEPARATOR}{self.checksum}\n"

    @classmethod
    def parse(cls, line: str) -> LedgerRecord:
        """Parse a single ledger line (trailing newline optional).

        Raises:
            ValueError: If the separator is missing or either side is empty.
        """
        text = line.rstrip("\n")
        path, sep, checksum = text.rpartition(RECORD_SEPARATOR)
        if not sep or not path or not checksum:
            raise ValueError(f"malformed ledger line: {line!r}")
        return cls(path=path, checksum=checksum)


def read_ledger(path: str | os.PathLike[str]) -> list[LedgerRecord]:
    """Read every record from the ledger at *path*, in file order.

    Blank lines are skipped.  Any :exc:`OSError` propagates, and a malformed
    line raises :exc:`ValueError`.
    """
    records: list[LedgerRecord] = []
    with open(path, encoding="utf-8", newline="\n") as fh:
        for line in fh:
            if not line.strip():
                continue
            records.append(LedgerRecord.parse(line))
    return records
