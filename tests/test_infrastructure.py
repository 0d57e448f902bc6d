"""Tests for settings and the GitPython clone adapter."""

from pathlib import Path
from unittest.mock import MagicMock, patch

from reposcope.infrastructure.config import Settings
from reposcope.infrastructure.git_cloner import GitPythonCloner


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("WORKSPACE_DIR", "SOURCE_SUFFIX", "SOURCE_ENCODING", "CLONE_DEPTH"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.workspace_dir == Path("src/main/resources/clonedRepo")
        assert settings.source_suffix == ".java"
        assert settings.source_encoding == "utf-8"
        assert settings.clone_depth is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("WORKSPACE_DIR", "/tmp/ws")
        monkeypatch.setenv("CLONE_DEPTH", "1")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.workspace_dir == Path("/tmp/ws")
        assert settings.clone_depth == 1
        assert settings.log_level == "debug"


class TestGitPythonCloner:
    def test_full_clone_by_default(self, tmp_path):
        repo = MagicMock()
        with patch("reposcope.infrastructure.git_cloner.Repo.clone_from", return_value=repo) as clone_from:
            GitPythonCloner().clone("https://host/x", tmp_path / "ws")

        clone_from.assert_called_once_with("https://host/x", tmp_path / "ws")
        repo.close.assert_called_once()

    def test_shallow_clone_of_branch(self, tmp_path):
        with patch("reposcope.infrastructure.git_cloner.Repo.clone_from") as clone_from:
            GitPythonCloner(depth=1, branch="dev").clone("https://host/x", tmp_path)

        clone_from.assert_called_once_with("https://host/x", tmp_path, depth=1, branch="dev")
