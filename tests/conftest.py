"""
Shared pytest fixtures for the genlock test suite.

- work_dir:     run each test from an isolated working directory
- make_file:    build header-only GeneratedFile descriptors backed by temp files
- render_dir:   directory the pipeline renders into
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from genlock.codegen import GeneratedFile, header


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Change into a fresh working directory for the duration of the test.

    Ledgers resolved without an output directory land under this path, so no
    test ever writes into the repository.
    """
    cwd = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def render_dir(tmp_path: Path) -> Path:
    """Directory that GeneratedFile.render() writes into."""
    out = tmp_path / "render"
    out.mkdir()
    return out


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[[str], GeneratedFile]:
    """
    Factory for single-section GeneratedFile descriptors.

    Each call creates a distinct temp file (the declared path) whose content
    is replaced when the descriptor is rendered.
    """
    sources = tmp_path / "sources"
    sources.mkdir()
    counter = iter(range(1_000_000))

    def _make(title: str) -> GeneratedFile:
        declared = sources / f"{next(counter):03d}_{title}.py"
        declared.write_text("", encoding="utf-8")
        return GeneratedFile(str(declared), [header("", title)])

    return _make
