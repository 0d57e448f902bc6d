"""Workspace manager — a clean local directory holding the cloned tree."""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from reposcope.domain.exceptions import CloneError, WorkspacePreparationError
from reposcope.domain.ports.repo_cloner import RepoCloner
from reposcope.domain.value_objects import RepoUrl

logger = logging.getLogger(__name__)


class WorkspaceManager:
    """Owns the single workspace directory analyses are run in.

    Parameters
    ----------
    cloner:
        Collaborator that fetches the repository into the directory.
    directory:
        Workspace path.  Anything already there is deleted before each clone.
    """

    def __init__(self, cloner: RepoCloner, directory: Path) -> None:
        self._cloner = cloner
        self._directory = Path(directory)
        self.lock = threading.Lock()

    @property
    def directory(self) -> Path:
        return self._directory

    def prepare(self, url: RepoUrl) -> Path:
        """Clear the workspace and clone ``url`` into it."""
        if self._directory.exists() or self._directory.is_symlink():
            logger.info("Deleting existing cloned repository directory.")
            _delete_tree(self._directory)

        try:
            self._cloner.clone(url.raw, self._directory)
        except Exception as exc:
            logger.error("Error cloning repository: %s", url.raw, exc_info=True)
            raise CloneError(f"Error cloning repository: {exc}") from exc

        return self._directory


def _delete_tree(path: Path) -> None:
    """Remove ``path`` depth-first, children before their parent."""
    try:
        if path.is_dir() and not path.is_symlink():
            for child in path.iterdir():
                _delete_tree(child)
            path.rmdir()
        else:
            path.unlink()
    except OSError as exc:
        absolute = path.absolute()
        logger.warning("Failed to delete file or directory: %s", absolute)
        raise WorkspacePreparationError(f"Failed to delete {absolute}") from exc
