"""Tests for the ledger line format and reader."""

from __future__ import annotations

from pathlib import Path

import pytest

from genlock.ledger import LedgerRecord, read_ledger

CHECKSUM = "ab" * 32


class TestLedgerRecord:
    """format() and parse() for single lines."""

    @pytest.mark.unit
    def test_format(self) -> None:
        record = LedgerRecord(path="gen/models.py", checksum=CHECKSUM)
        assert record.format() == f"gen/models.py::{CHECKSUM}\n"

    @pytest.mark.unit
    def test_parse_with_and_without_newline(self) -> None:
        expected = LedgerRecord(path="gen/models.py", checksum=CHECKSUM)
        assert LedgerRecord.parse(f"gen/models.py::{CHECKSUM}\n") == expected
        assert LedgerRecord.parse(f"gen/models.py::{CHECKSUM}") == expected

    @pytest.mark.unit
    def test_path_containing_separator(self) -> None:
        record = LedgerRecord(path="weird::name.py", checksum=CHECKSUM)
        assert LedgerRecord.parse(record.format()) == record

    @pytest.mark.unit
    @pytest.mark.parametrize("line", ["no separator", f"::{CHECKSUM}", "path.py::", ""])
    def test_malformed_lines(self, line: str) -> None:
        with pytest.raises(ValueError, match="malformed"):
            LedgerRecord.parse(line)


class TestReadLedger:
    """read_ledger() returns records in file order."""

    @pytest.mark.unit
    def test_reads_in_order_and_skips_blank_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "genlock.lock"
        path.write_text(f"b.py::{CHECKSUM}\n\na.py::{'cd' * 32}\n", encoding="utf-8")

        records = read_ledger(path)

        assert [r.path for r in records] == ["b.py", "a.py"]
        assert records[1].checksum == "cd" * 32

    @pytest.mark.unit
    def test_empty_ledger(self, tmp_path: Path) -> None:
        path = tmp_path / "genlock.lock"
        path.write_bytes(b"")
        assert read_ledger(path) == []

    @pytest.mark.unit
    def test_malformed_line_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "genlock.lock"
        path.write_text("garbage\n", encoding="utf-8")
        with pytest.raises(ValueError):
            read_ledger(path)

    @pytest.mark.unit
    def test_missing_ledger_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_ledger(tmp_path / "missing.lock")
