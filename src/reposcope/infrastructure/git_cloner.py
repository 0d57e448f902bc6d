"""GitPython adapter — implements the RepoCloner port."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from git import Repo

logger = logging.getLogger(__name__)


class GitPythonCloner:
    """Concrete RepoCloner that shells out to ``git clone`` through GitPython."""

    def __init__(self, depth: int | None = None, branch: str | None = None) -> None:
        self._depth = depth
        self._branch = branch

    def clone(self, url: str, directory: Path) -> None:
        """Clone ``url`` into ``directory``; ``git.GitCommandError`` propagates."""
        options: dict[str, Any] = {}
        if self._depth is not None:
            options["depth"] = self._depth
        if self._branch:
            options["branch"] = self._branch

        logger.info("Cloning repository from URL: %s into directory: %s", url, directory)
        repo = Repo.clone_from(url, directory, **options)
        repo.close()
        logger.info("Repository cloned successfully.")
