"""Tests for genlock.ledger.paths.resolve_ledger_path."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from genlock.ledger import LEDGER_FILENAME, LedgerPathError, resolve_ledger_path


class TestResolveLedgerPath:
    """Resolution is deterministic, absolute and normalized."""

    @pytest.mark.unit
    def test_default_is_working_directory(self, work_dir: Path) -> None:
        assert resolve_ledger_path() == work_dir.resolve() / "gen" / "genlock.lock"

    @pytest.mark.unit
    def test_empty_string_means_working_directory(self, work_dir: Path) -> None:
        assert resolve_ledger_path("") == resolve_ledger_path(None)

    @pytest.mark.unit
    def test_relative_output_dir(self, work_dir: Path) -> None:
        assert resolve_ledger_path("tmp") == work_dir.resolve() / "tmp" / "gen" / "genlock.lock"

    @pytest.mark.unit
    def test_normalizes_redundant_separators_and_parent_segments(self) -> None:
        assert resolve_ledger_path("///foo/bar/..//") == Path("/foo/gen/genlock.lock")
        assert resolve_ledger_path("///foo/bar/..//") == resolve_ledger_path("/foo")

    @pytest.mark.unit
    def test_collapses_double_leading_slash(self) -> None:
        assert resolve_ledger_path("//foo") == Path("/foo/gen/genlock.lock")
        assert resolve_ledger_path("//foo") == resolve_ledger_path("/foo")
        assert resolve_ledger_path("//foo/bar/..") == resolve_ledger_path("/foo")
        assert str(resolve_ledger_path("//foo")) == "/foo/gen/genlock.lock"

    @pytest.mark.unit
    def test_normalizes_dot_segments(self) -> None:
        assert resolve_ledger_path("/foo/./baz/.") == Path("/foo/baz/gen/genlock.lock")

    @pytest.mark.unit
    def test_accepts_path_objects(self, tmp_path: Path) -> None:
        assert resolve_ledger_path(tmp_path) == resolve_ledger_path(str(tmp_path))

    @pytest.mark.unit
    def test_result_is_absolute(self, work_dir: Path) -> None:
        assert resolve_ledger_path("a/../b").is_absolute()

    @pytest.mark.unit
    def test_ledger_filename_suffix(self, tmp_path: Path) -> None:
        assert resolve_ledger_path(tmp_path).as_posix().endswith("/" + LEDGER_FILENAME)

    @pytest.mark.unit
    def test_does_not_touch_filesystem(self, tmp_path: Path) -> None:
        resolve_ledger_path(tmp_path / "never")
        assert not (tmp_path / "never").exists()

    @pytest.mark.unit
    def test_null_byte_is_rejected(self) -> None:
        with pytest.raises(LedgerPathError):
            resolve_ledger_path("bad\x00dir")

    @pytest.mark.unit
    def test_missing_working_directory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _deleted_cwd() -> str:
            raise FileNotFoundError(2, "No such file or directory")

        monkeypatch.setattr(os, "getcwd", _deleted_cwd)

        with pytest.raises(LedgerPathError) as exc_info:
            resolve_ledger_path()

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert "failed to resolve ledger path" in str(exc_info.value)
