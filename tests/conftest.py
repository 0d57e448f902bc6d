"""Shared fixtures: a fake cloner and helpers for building workspaces."""

from __future__ import annotations

from pathlib import Path

import pytest

from reposcope.services.aggregator import AnalysisState
from reposcope.services.analyze_repo import AnalyzeRepoUseCase
from reposcope.services.java_parser import parse_source
from reposcope.services.type_visitor import visit_compilation_unit
from reposcope.services.workspace import WorkspaceManager


class FakeCloner:
    """RepoCloner that writes a fixed set of files instead of cloning."""

    def __init__(self, files: dict[str, str | bytes] | None = None, error: Exception | None = None):
        self.files = files or {}
        self.error = error
        self.calls: list[tuple[str, Path]] = []

    def clone(self, url: str, directory: Path) -> None:
        self.calls.append((url, directory))
        if self.error is not None:
            raise self.error
        directory.mkdir(parents=True)
        for relative, content in self.files.items():
            target = directory / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content, encoding="utf-8")


@pytest.fixture
def workspace_dir(tmp_path: Path) -> Path:
    return tmp_path / "clonedRepo"


@pytest.fixture
def make_use_case(workspace_dir: Path):
    """Factory: ``make_use_case(files)`` → (use case, fake cloner)."""

    def _make(files: dict[str, str | bytes] | None = None, error: Exception | None = None):
        cloner = FakeCloner(files, error)
        workspace = WorkspaceManager(cloner=cloner, directory=workspace_dir)
        return AnalyzeRepoUseCase(workspace=workspace), cloner

    return _make


@pytest.fixture
def analyze_source():
    """Run the type visitor over one source string and return the state."""

    def _analyze(source: str) -> AnalysisState:
        state = AnalysisState()
        visit_compilation_unit(parse_source(source), state)
        return state

    return _analyze
